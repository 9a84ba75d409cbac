#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
from dataclasses import Field, dataclass, fields, replace
import os
from typing import *

_TRUE_WORDS = {"1", "true", "yes", "on"}


def env_to_mapping(prefix: str) -> dict[str, str]:
    """
    NOSWEAT__LOGGING_LEVEL=DEBUG  -> {"logging_level": "DEBUG"}
    NOSWEAT__JSON_LOGS=true       -> {"json_logs": "true"}

    Values stay strings; `ParserSettings.load` casts them by field type.
    """
    n = len(prefix)
    out: dict[str, str] = {}
    for k, v in os.environ.items():
        if not k.startswith(prefix):
            continue
        key = k[n:].strip().lower()
        out[key] = v.strip()
    return out


def _cast(f: Field, value: Any) -> Any:
    if f.type is bool or f.type == "bool":
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_WORDS
        return bool(value)
    return str(value).strip()


@dataclass
class ParserSettings:
    """
    Settings of the parser tool itself. They never feed into configuration
    values: those come only from the default and overlay files.
    """
    logging_level: str = "INFO"
    json_logs: bool = False
    encoding: str = "utf-8"

    @classmethod
    def load(cls,
             env_prefix: str = "NOSWEAT__",
             runtime_overrides: Optional[Mapping[str, Any]] = None,
    ) -> "ParserSettings":
        by_name = {f.name: f for f in fields(cls)}

        # 1) Python defaults
        settings = cls()

        # 2) ENV overrides
        env = env_to_mapping(env_prefix)
        if env:
            valid = {k: _cast(by_name[k], v) for k, v in env.items() if k in by_name}
            if valid:
                settings = replace(settings, **valid)

        # 3) runtime overrides
        if runtime_overrides:
            valid = {k: _cast(by_name[k], v) for k, v in runtime_overrides.items() if k in by_name}
            if valid:
                settings = replace(settings, **valid)

        settings.logging_level = settings.logging_level.upper()
        return settings
