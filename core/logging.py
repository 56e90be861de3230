from __future__ import annotations

import logging

from core.config import CFG


def get_logger(name: str = __name__) -> logging.Logger:
    level = getattr(logging, CFG.log_level.upper(), logging.INFO)
    logger = logging.getLogger(name)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    logger.setLevel(level)
    return logger
