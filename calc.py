#!/usr/bin/env python3
"""Launch the lot size calculator TUI with sane defaults."""
from __future__ import annotations

import os

from lotsize.main import main


if __name__ == "__main__":
    os.environ.setdefault("LOTSIZE_LOG_LEVEL", "WARNING")
    main()
