"""Utility modules for Escapade.

Provides:
- hexadecimal: hex2, hex4, hex8, hex_variable, decimal for numeric escapes
- surrogates: combine, split and classification of UTF-16 surrogates
- logger: get_logger for logging
"""

from escapade.utils.hexadecimal import decimal, hex2, hex4, hex8, hex_variable
from escapade.utils.logger import get_logger
from escapade.utils.surrogates import combine, split

__all__ = [
    "combine",
    "decimal",
    "get_logger",
    "hex2",
    "hex4",
    "hex8",
    "hex_variable",
    "split",
]
