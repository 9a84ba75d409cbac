#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/

import argparse
import sys
from typing import *

from .logger import init_logging
from .settings import ParserSettings
from .store import ConfigStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nosweat",
        description="Parse a default configuration file and an optional configuration file, "
                    "then print the resulting typed values",
    )
    parser.add_argument("default_config", type=str, help="default configuration file (declares the keys)")
    parser.add_argument("config", type=str, nargs="?", help="configuration file overriding default values")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="increase logging verbosity"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="render log events as JSON"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.verbose:
        overrides["logging_level"] = "DEBUG"
    if args.json_logs:
        overrides["json_logs"] = True
    settings = ParserSettings.load(runtime_overrides=overrides)
    init_logging(settings.logging_level, json=settings.json_logs)

    store = ConfigStore(args.default_config, args.config, settings=settings)
    store.print_configuration(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
