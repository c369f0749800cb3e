"""Root logging setup driven by ObservabilityConfig.

Modules log through stdlib loggers with ``extra={...}`` context. When
``structured`` is set, the root handler renders every record as one JSON
object per line through structlog, with the ``extra`` fields inlined.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import structlog
from structlog.types import Processor

from .config import ObservabilityConfig, get_config


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    # Records come from stdlib loggers, so everything runs in the pre-chain
    pre_chain: List[Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
    ]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
    )


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> None:
    """Configure root logging.

    Args:
        config: Observability settings (defaults to the app config).
        level: Optional level override, e.g. from a CLI flag.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logging.basicConfig(
        level=(level or config.level).upper(),
        handlers=[handler],
        force=True,
    )
