"""Module entrypoint for the lot size calculator.

Run:
  python -m lotsize
"""

from __future__ import annotations

from .main import main


if __name__ == "__main__":
    main()
