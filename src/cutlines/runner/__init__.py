from .config import RunConfig
from .main import main, run


__all__ = [
    "RunConfig",
    "main",
    "run",
]
