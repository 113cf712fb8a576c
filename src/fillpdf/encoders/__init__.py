# src/fillpdf/encoders/__init__.py

"""Field-definition payloads understood by pdftk fill_form"""

from fillpdf.encoders.fdf import encode_fdf
from fillpdf.encoders.xfdf import encode_xfdf

__all__ = ["encode_fdf", "encode_xfdf"]
