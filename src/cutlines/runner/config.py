"""
config.py - Configuration dataclass for batch polyline clipping.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for one batch run."""
    logger_level: int = logging.INFO
    output_dir: Path = Path("./out")
    log_dir: Optional[Path] = Path("./logs")
    preview: bool = False
    img_size: Tuple[int, int] = (800, 800)
    dpi: int = 100
    max_failures: int = 5

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.log_dir is not None:
            object.__setattr__(self, "log_dir", Path(self.log_dir))
        if self.max_failures < 1:
            raise ValueError(f"max_failures must be >= 1, got {self.max_failures}")
        self.output_dir.mkdir(parents=True, exist_ok=True)
