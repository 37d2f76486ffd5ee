"""Logging estruturado JSON do Palpitheion.

`configure_logging` instala um único handler no logger raiz; todo record
sai com asctime, level, logger, message, correlation_id e service, além
dos campos passados em `extra` (credenciais redigidas).
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
