"""Utility functions."""

import json
import logging.config
import structlog
import yaml
from pathlib import Path
from typing import Any, Callable, Optional, Union

logger = structlog.get_logger(__name__)


def setup_logging(config_path: Optional[Union[str, Path]] = None, log_level: str = "INFO") -> None:
    """Setup structured logging configuration."""
    use_config_file = bool(config_path) and Path(config_path).exists()
    if use_config_file:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        # Default configuration
        logging.basicConfig(
            level=getattr(logging, log_level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if use_config_file else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def pretty_string(obj: Any, serializer: Optional[Callable[[Any], Any]] = None) -> str:
    """Return the object as indented JSON, or its plain text form if it cannot be marshalled."""
    try:
        data = serializer(obj) if serializer else obj
        return json.dumps(data, indent=4)
    except Exception as e:
        logger.warning("Unable to marshal object", error=str(e), type=type(obj).__name__)
    try:
        return str(obj) or repr(obj)
    except Exception:
        return object.__repr__(obj)
