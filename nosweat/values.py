#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
from dataclasses import dataclass
from enum import Enum
import math
import re
from typing import *

from .exceptions import ConversionError

# space, horizontal tab, new line, carriage return, vertical tab and form feed
WHITESPACE = " \t\n\r\v\f"

INT_MIN = -2**31
INT_MAX = 2**31 - 1

# Case-insensitive accepted names for the boolean values.
BOOL_TRUE_TOKENS = ("true", "yes", "y", "on", "1", "right")
BOOL_FALSE_TOKENS = ("false", "no", "n", "off", "0", "wrong")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIALS = {"inf", "infinity", "nan"}

ValueT: TypeAlias = int | float | str | bool


def trim(s: str) -> str:
    return s.strip(WHITESPACE)


def to_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ConversionError(ValueType.INT, text)
    value = int(text)
    if not (INT_MIN <= value <= INT_MAX):
        raise ConversionError(ValueType.INT, text, "out of range")
    return value


def to_float(text: str) -> float:
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.lower() in _FLOAT_SPECIALS:
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise ConversionError(ValueType.FLOAT, text)
    value = float(text)
    if math.isinf(value):
        raise ConversionError(ValueType.FLOAT, text, "out of range")
    # a non-zero literal that underflows to zero
    mantissa = text.lower().partition("e")[0]
    if value == 0.0 and any(c in "123456789" for c in mantissa):
        raise ConversionError(ValueType.FLOAT, text, "out of range")
    return value


def to_string(text: str) -> str:
    return text


def to_bool(text: str) -> bool:
    low = text.lower()
    if low in BOOL_FALSE_TOKENS:
        return False
    if low in BOOL_TRUE_TOKENS:
        return True
    raise ConversionError(ValueType.BOOL, text, "not a boolean token")


class ValueType(Enum):
    """
    The four value types a key can be declared with. The member value is the
    declaration token used in configuration files.
    """
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value

    @property
    def prefix(self) -> str:
        # the trailing space is part of the token, otherwise it could as well be a key name
        return self.value + " "

    @property
    def zero(self) -> ValueT:
        return _ZEROS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    def convert(self, text: str) -> ValueT:
        """Convert trimmed value text; raises ConversionError on failure."""
        return _CONVERTERS[self](text)

    def render(self, value: ValueT) -> str:
        if self is ValueType.BOOL:
            return "true" if value else "false"
        return str(value)

    @classmethod
    def from_str(cls, s: str) -> "ValueType":
        for m in cls:
            if m.value == s:
                return m
        raise ValueError(f"Unknown value type: {s!r}")

    @classmethod
    def match_prefix(cls, line: str) -> Optional["ValueType"]:
        """Return the type whose declaration token (with its space) starts `line`."""
        for m in cls:
            if line.startswith(m.prefix):
                return m
        return None


_ZEROS: dict[ValueType, ValueT] = {
    ValueType.INT: 0,
    ValueType.FLOAT: 0.0,
    ValueType.STRING: "",
    ValueType.BOOL: False,
}
_LABELS: dict[ValueType, str] = {
    ValueType.INT: "Integer",
    ValueType.FLOAT: "Float",
    ValueType.STRING: "String",
    ValueType.BOOL: "Boolean",
}
_CONVERTERS: dict[ValueType, Callable[[str], ValueT]] = {
    ValueType.INT: to_int,
    ValueType.FLOAT: to_float,
    ValueType.STRING: to_string,
    ValueType.BOOL: to_bool,
}


@dataclass
class TypedSlot:
    # `current` equals `default` until a setter targeting the same key and type changes it
    value_type: ValueType
    default: ValueT
    current: ValueT

    @classmethod
    def declare(cls, value_type: ValueType, text: str) -> "TypedSlot":
        value = value_type.convert(text)
        return cls(value_type, value, value)

    def assign(self, text: str) -> bool:
        """
        Convert `text` and overwrite the current value. Returns True if the value
        was applied; on conversion failure the current value is left untouched.
        """
        try:
            self.current = self.value_type.convert(text)
        except ConversionError:
            return False
        return True

    @property
    def is_default(self) -> bool:
        return self.current == self.default
