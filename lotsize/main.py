"""Entrypoint for the lot size calculator TUI."""
from __future__ import annotations

import logging

from textual.logging import TextualHandler

from .config import load_config
from .ui import LotSizeApp


def main() -> None:
    config = load_config()
    logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])
    LotSizeApp(config).run()


if __name__ == "__main__":
    main()
