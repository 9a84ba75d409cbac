#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
from nosweat.settings import ParserSettings, env_to_mapping


def test_python_defaults(monkeypatch):
    for k in ("NOSWEAT__LOGGING_LEVEL", "NOSWEAT__JSON_LOGS", "NOSWEAT__ENCODING"):
        monkeypatch.delenv(k, raising=False)
    s = ParserSettings.load()
    assert s.logging_level == "INFO"
    assert s.json_logs is False
    assert s.encoding == "utf-8"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NOSWEAT__LOGGING_LEVEL", "debug")
    monkeypatch.setenv("NOSWEAT__JSON_LOGS", "TRUE")
    monkeypatch.setenv("NOSWEAT__UNKNOWN_KEY", "1")
    monkeypatch.setenv("NOSWEAT__LOAD", "ignored")

    assert env_to_mapping("NOSWEAT__")["json_logs"] == "TRUE"
    s = ParserSettings.load()
    assert s.logging_level == "DEBUG"
    assert s.json_logs is True


def test_runtime_overrides_win(monkeypatch):
    monkeypatch.setenv("NOSWEAT__ENCODING", "latin-1")
    s = ParserSettings.load(runtime_overrides={"encoding": "utf-16", "bogus": 1})
    assert s.encoding == "utf-16"


def test_custom_prefix(monkeypatch):
    monkeypatch.setenv("MYAPP_LOGGING_LEVEL", "warning")
    assert ParserSettings.load(env_prefix="MYAPP_").logging_level == "WARNING"


def test_values_are_cast_by_field_type(monkeypatch):
    monkeypatch.setenv("NOSWEAT__ENCODING", "1")
    monkeypatch.setenv("NOSWEAT__LOGGING_LEVEL", "10")
    monkeypatch.setenv("NOSWEAT__JSON_LOGS", "off")
    s = ParserSettings.load()
    assert s.encoding == "1"
    assert s.logging_level == "10"
    assert s.json_logs is False

    s = ParserSettings.load(runtime_overrides={"json_logs": "yes", "encoding": " latin-1 "})
    assert s.json_logs is True
    assert s.encoding == "latin-1"
    assert ParserSettings.load(runtime_overrides={"json_logs": True}).json_logs is True
