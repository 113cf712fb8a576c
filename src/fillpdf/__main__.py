# src/fillpdf/__main__.py

import sys

from fillpdf.cli.main import main

sys.exit(main())
