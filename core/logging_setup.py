# binpacking/core/logging_setup.py
from __future__ import annotations
import logging
from pathlib import Path
from datetime import datetime

def setup_logging(log_dir: Path, name: str = "binpacking", level: int = logging.INFO) -> logging.Logger:
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # File handler
    fh = logging.FileHandler(log_dir / f"{name}.log")
    fh.setLevel(level)
    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    fmt = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    fh.setFormatter(fmt)
    ch.setFormatter(fmt)
    # Avoid duplicate handlers on reruns
    if not logger.handlers:
        logger.addHandler(fh)
        logger.addHandler(ch)
    else:
        fh.close()
    return logger

def run_stamp() -> str:
    """
    Timestamp string for result files.
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
