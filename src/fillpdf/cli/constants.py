# src/fillpdf/cli/constants.py

HELP_FLAGS = {"--help", "-h", "help"}
VERSION_FLAGS = {"--version"}
VERBOSE_FLAGS = {"--verbose", "-v"}
DEBUG_FLAGS = {"--debug"}

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MISSING = 2
EXIT_FAILURE = 3
