from .logging_utils import ColorFormatter, configure_logging


__all__ = [
    "ColorFormatter",
    "configure_logging",
]
