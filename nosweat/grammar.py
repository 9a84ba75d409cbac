#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
from dataclasses import dataclass
from typing import *

from .values import ValueType, WHITESPACE, trim

# Line grammars:
#   default file:  <type> <key> (":"|"="|":=") <value>
#   overlay file:  [<type> ]<key> (":"|"="|":=") <value>
ASSIGNMENT_CHARS = "=:"


@dataclass(frozen=True)
class Declaration:
    """A schema line of the default file."""
    value_type: ValueType
    key: str
    value: str


@dataclass(frozen=True)
class Assignment:
    """
    An overlay line. `value_type` is only set for type-enforcing lines, i.e.
    lines starting with a declaration token.
    """
    key: str
    value: str
    value_type: Optional[ValueType] = None


def split_assignment(line: str) -> Optional[tuple[str, str]]:
    """
    Split a trimmed line at its first assignment operator into (lhs, rhs), both
    untrimmed. ":=" counts as a single operator. Returns None if there is no
    operator or if the operator ends on the last character of the line.
    """
    index = -1
    for i, ch in enumerate(line):
        if ch in ASSIGNMENT_CHARS:
            index = i
            break
    if index < 0:
        return None
    end = index + 1
    if line[index] == ":" and line[end:end + 1] == "=":
        end += 1
    if end >= len(line):
        return None
    return line[:index], line[end:]


def parse_declaration(raw_line: str) -> Optional[Declaration]:
    """Tokenize one default-file line; None for anything that is not a declaration."""
    line = trim(raw_line)
    if ValueType.match_prefix(line) is None:
        return None  # comments, blank lines and free text

    parts = split_assignment(line)
    if parts is None:
        return None
    type_and_key, value = trim(parts[0]), trim(parts[1])
    if not type_and_key or not value:
        return None

    # only the first space separates type from key, the key may contain further spaces
    type_token, _, key = type_and_key.partition(" ")
    type_token, key = trim(type_token), trim(key)
    if not key:
        return None
    try:
        value_type = ValueType.from_str(type_token)
    except ValueError:
        return None
    return Declaration(value_type, key, value)


def parse_assignment(raw_line: str) -> Optional[Assignment]:
    """Tokenize one overlay-file line; None if it has no usable key/value shape."""
    line = trim(raw_line)
    parts = split_assignment(line)
    if parts is None or parts[0] == "":
        return None  # no operator, empty key or empty value
    key, value = trim(parts[0]), trim(parts[1])

    # The type token is checked on the whole line, so "int" alone before the
    # operator still enforces the type (leaving an empty key).
    value_type = ValueType.match_prefix(line)
    if value_type is not None:
        key = key[len(value_type.value):].lstrip(WHITESPACE)
    return Assignment(key, value, value_type)
