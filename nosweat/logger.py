#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/

import copy
from logging.config import dictConfig
import structlog
from typing import Any

NOSWEAT_LOG = "nosweat"
_logger = None
pre_chain = [
    # Add the log level and producer to the event_dict if the log entry is not from structlog.
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
]
config_dict = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'nosweat-formatter': {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': structlog.dev.ConsoleRenderer(colors=False),
            'foreign_pre_chain': pre_chain,
        },
        'jsonformatter': {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': structlog.processors.JSONRenderer(sort_keys=False),
            'foreign_pre_chain': pre_chain,
        },
    },
    'handlers': {
        'structlog-console': {
            'level': 'DEBUG',
            'formatter': 'nosweat-formatter',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',  # keep stdout for the configuration dump
        },
    },
    'loggers': {
        NOSWEAT_LOG: {
            'handlers': ['structlog-console'],
            'level': 'INFO',
            'propagate': False
        },
    },
}


def logging_config(level: str = "INFO", json: bool = False) -> dict[str, Any]:
    """Return a copy of `config_dict` for the given level and renderer."""
    cfg = copy.deepcopy(config_dict)
    cfg['loggers'][NOSWEAT_LOG]['level'] = level.upper()
    if json:
        cfg['handlers']['structlog-console']['formatter'] = 'jsonformatter'
    return cfg


def init_logging(level: str = "INFO", json: bool = False) -> Any:
    global _logger
    if _logger is not None:
        return _logger

    # configure logging:
    dictConfig(logging_config(level, json))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,            # filter first, parsing is chatty at DEBUG
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),    # Include the stack when stack_info=True
            structlog.processors.format_exc_info,        # Include the exception when exc_info=True
            structlog.processors.UnicodeDecoder(),       # Decodes the unicode values in any kv pairs
            structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S,%f'),
            # this must be the last one if further customizing formats below...
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _logger = structlog.get_logger(NOSWEAT_LOG)
    _logger.debug("Initialized logging for nosweat", level=level.upper())
    return _logger


def reset_logging() -> None:
    """Forget the configured logger and restore structlog defaults."""
    global _logger
    _logger = None
    structlog.reset_defaults()


def get_logger(**initial_values: Any) -> Any:
    """Logger for library code; usable whether or not `init_logging` ran."""
    return structlog.get_logger(NOSWEAT_LOG, **initial_values)
