#  Copyright (c) 2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
#

# nosweat/__init__.py
import sys
if sys.version_info < (3, 11):
    raise RuntimeError("nosweat requires Python 3.11 or newer")

from .exceptions import NoSweatError, ConversionError
from .settings import ParserSettings
from .store import ConfigStore
from .values import ValueType, TypedSlot

__all__ = [
    "ConfigStore",
    "ConversionError",
    "NoSweatError",
    "ParserSettings",
    "TypedSlot",
    "ValueType",
]
