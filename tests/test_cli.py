#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/
import logging
import textwrap

import pytest

from nosweat.__main__ import build_parser, main
from nosweat.logger import NOSWEAT_LOG, init_logging, logging_config, reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch):
    for k in ("NOSWEAT__LOGGING_LEVEL", "NOSWEAT__JSON_LOGS", "NOSWEAT__ENCODING"):
        monkeypatch.delenv(k, raising=False)
    reset_logging()
    yield
    reset_logging()


def _write(tmp_path, name, body):
    p = tmp_path / name
    p.write_text(textwrap.dedent(body), encoding="utf-8")
    return str(p)


def test_parser_arguments():
    args = build_parser().parse_args(["defaults.cfg"])
    assert args.default_config == "defaults.cfg"
    assert args.config is None
    assert args.verbose is False
    args = build_parser().parse_args(["defaults.cfg", "user.cfg", "-v", "--json-logs"])
    assert (args.config, args.verbose, args.json_logs) == ("user.cfg", True, True)


def test_main_prints_configuration(tmp_path, capsys):
    defaults = _write(tmp_path, "default.cfg", """\
        int port := 8080
        bool debug = no
    """)
    user = _write(tmp_path, "user.cfg", "port = 9090\n")

    assert main([defaults, user]) == 0
    out = capsys.readouterr().out
    assert f"default_config_file='{defaults}', config_file='{user}'" in out
    assert "\t\tport: 9090 (default value: 8080)" in out
    assert "\t\tdebug: false (default value: false)" in out


def test_main_with_missing_default_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.cfg")
    assert main([missing]) == 0
    captured = capsys.readouterr()
    assert captured.out == f"ConfigStore object: default_config_file='{missing}', config_file=''\n"
    assert "could not open default configuration file" in captured.err


def test_logging_config_variants():
    cfg = logging_config("debug", json=True)
    assert cfg["loggers"][NOSWEAT_LOG]["level"] == "DEBUG"
    assert cfg["handlers"]["structlog-console"]["formatter"] == "jsonformatter"
    # the module level dictionary is not modified
    assert logging_config()["handlers"]["structlog-console"]["formatter"] == "nosweat-formatter"


def test_init_logging_is_idempotent():
    first = init_logging("WARNING")
    assert init_logging("DEBUG") is first
    assert logging.getLogger(NOSWEAT_LOG).level == logging.WARNING
