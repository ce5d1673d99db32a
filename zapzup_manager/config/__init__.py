"""Configuration: environment settings and logging setup."""

from zapzup_manager.config.settings import Config, effective_log_level, get_config
from zapzup_manager.config.logging_config import setup_logging, correlation_id_var

__all__ = [
    "Config",
    "effective_log_level",
    "get_config",
    "setup_logging",
    "correlation_id_var",
]
