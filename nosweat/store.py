#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
import sys
from typing import *

from .exceptions import ConversionError
from .grammar import parse_assignment, parse_declaration
from .logger import get_logger
from .settings import ParserSettings
from .values import TypedSlot, ValueT, ValueType, trim


class ConfigStore:
    """
    Typed key/value store filled from two flat configuration files.

    The default file declares every recognized key together with its type and
    default value (``int max_number_of_users := 1``). An optional overlay file
    may then change the values of those keys (``max_number_of_users = 22``) but
    can never add keys or change their types. Anything malformed is skipped
    without complaint; only a file that cannot be opened is reported, as a
    warning.
    """

    def __init__(self,
                 default_config_path: str,
                 config_path: Optional[str] = None,
                 *,
                 settings: Optional[ParserSettings] = None,
    ) -> None:
        self.settings = settings or ParserSettings()
        self.default_config_path = str(default_config_path)
        self.config_path: Optional[str] = None
        # one slot per key, in declaration order; a key has exactly one type
        self._slots: dict[str, TypedSlot] = {}

        self.load_defaults()
        if config_path is not None:
            self.overlay(config_path)

    def __repr__(self) -> str:
        return (f"ConfigStore(default_config_path={self.default_config_path!r}, "
                f"config_path={self.config_path!r}, keys={len(self._slots)})")

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and trim(key) in self._slots

    def _read_lines(self, path: str, description: str) -> Optional[list[str]]:
        try:
            # lines end at "\n" only, a stray "\r" is removed by trimming
            with open(path, "r", encoding=self.settings.encoding, errors="replace", newline="\n") as f:
                return f.readlines()
        except (OSError, ValueError, LookupError) as exc:
            # missing or unreadable file, NUL in the path, unknown encoding
            get_logger().warning(f"could not open {description}", path=path, error=str(exc))
            return None

    # ----- parsing -----
    def load_defaults(self, path: Optional[str] = None) -> int:
        """
        Parse a default file and register every valid declaration whose key is
        not taken yet. Returns the number of keys registered.
        """
        if path is not None:
            self.default_config_path = str(path)
        lines = self._read_lines(self.default_config_path, "default configuration file")
        if lines is None:
            return 0

        registered = 0
        for line in lines:
            decl = parse_declaration(line)
            if decl is None:
                continue
            if decl.key in self._slots:
                continue  # first declaration wins, across all types
            try:
                self._slots[decl.key] = TypedSlot.declare(decl.value_type, decl.value)
            except ConversionError:
                continue
            registered += 1

        get_logger().debug("parsed default configuration file",
                           path=self.default_config_path, registered=registered, total=len(self._slots))
        return registered

    def overlay(self, path: str) -> int:
        """
        Apply a configuration file on top of the current values. Returns the
        number of lines whose value was applied.
        """
        self.config_path = str(path)
        lines = self._read_lines(self.config_path, "configuration file")
        if lines is None:
            return 0

        applied = 0
        for line in lines:
            assignment = parse_assignment(line)
            if assignment is None:
                continue
            if assignment.value_type is not None:
                # an explicit type is enforced: a key of another type is not touched
                ok = self._set(assignment.value_type, assignment.key, assignment.value)
            else:
                ok = self.set_value(assignment.key, assignment.value)
            applied += ok

        get_logger().debug("applied configuration file", path=self.config_path, applied=applied)
        return applied

    read_config_file = overlay

    # ----- setters -----
    def _set(self, value_type: ValueType, key: str, value: str) -> bool:
        slot = self._slots.get(trim(key))
        if slot is None or slot.value_type is not value_type:
            return False
        return slot.assign(trim(value))

    def set_int(self, key: str, value: str) -> bool:
        return self._set(ValueType.INT, key, value)

    def set_float(self, key: str, value: str) -> bool:
        return self._set(ValueType.FLOAT, key, value)

    def set_string(self, key: str, value: str) -> bool:
        return self._set(ValueType.STRING, key, value)

    def set_bool(self, key: str, value: str) -> bool:
        return self._set(ValueType.BOOL, key, value)

    def set_value(self, key: str, value: str) -> bool:
        """Set an existing key, whatever its type. Unknown keys are ignored."""
        slot = self._slots.get(trim(key))
        if slot is None:
            return False
        return slot.assign(trim(value))

    # ----- accessors -----
    def _get(self, value_type: ValueType, key: str) -> ValueT:
        slot = self._slots.get(trim(key))
        if slot is None or slot.value_type is not value_type:
            return value_type.zero
        return slot.current

    def get_int(self, key: str) -> int:
        return self._get(ValueType.INT, key)

    def get_float(self, key: str) -> float:
        return self._get(ValueType.FLOAT, key)

    def get_string(self, key: str) -> str:
        return self._get(ValueType.STRING, key)

    def get_bool(self, key: str) -> bool:
        return self._get(ValueType.BOOL, key)

    # ----- presence queries -----
    def has_key(self, key: str) -> bool:
        """True if the key was declared, which the zero-value accessors cannot tell."""
        return key in self

    def type_of(self, key: str) -> Optional[ValueType]:
        slot = self._slots.get(trim(key))
        return None if slot is None else slot.value_type

    def get_default(self, key: str) -> Optional[ValueT]:
        slot = self._slots.get(trim(key))
        return None if slot is None else slot.default

    def keys(self) -> list[str]:
        return list(self._slots)

    # ----- diagnostics -----
    def format_configuration(self) -> str:
        lines = [f"ConfigStore object: default_config_file='{self.default_config_path}', "
                 f"config_file='{self.config_path or ''}'"]
        for value_type in ValueType:
            group = sorted(((k, s) for k, s in self._slots.items() if s.value_type is value_type),
                           key=lambda item: item[0])
            if not group:
                continue
            lines.append(f"\t{value_type.label} values:")
            for key, slot in group:
                lines.append(f"\t\t{key}: {value_type.render(slot.current)} "
                             f"(default value: {value_type.render(slot.default)})")
        return "\n".join(lines) + "\n"

    def print_configuration(self, file: Optional[TextIO] = None) -> None:
        """Print the current state of the store. Intended for debugging."""
        (file or sys.stdout).write(self.format_configuration())
