"""
persistence.py — Best-score storage.

A single integer kept in a small JSON file under a fixed key. Everything
here is best-effort: a bad or missing file reads as 0 and a failed write is
logged, never raised.
"""

import json
import logging
import os

from .config import BEST_SCORE_FILE, BEST_SCORE_KEY

logger = logging.getLogger(__name__)


class BestScoreStore:
    """Reads and writes the persisted best score."""

    def __init__(self, path: str = BEST_SCORE_FILE, key: str = BEST_SCORE_KEY):
        self.path = path
        self.key = key

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read best score from %s: %s", self.path, exc)
            return 0

        try:
            best = int(data[self.key])
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Ignoring malformed best score in %s", self.path)
            return 0
        return max(0, best)

    def save(self, best: int) -> bool:
        """Write `best` atomically. Returns False if the write failed."""
        data = {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                existing = json.load(fh)
            if isinstance(existing, dict):
                data = existing
        except (OSError, ValueError):
            pass  # unreadable file gets replaced

        data[self.key] = int(best)
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self.path, exc)
            return False
        logger.debug("Saved best score %d to %s", best, self.path)
        return True
