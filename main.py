"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame

Set FISHFEAST_LOG_LEVEL=DEBUG to see wave changes, and
FISHFEAST_BEST_FILE to move the best-score file.
"""

import logging

from fishfeast.config import LOG_LEVEL
from fishfeast.controller import GameController


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    GameController().run()


if __name__ == "__main__":
    main()
