"""UI package (calculator TUI + input state)."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import LotSizeApp as LotSizeApp

__all__ = ["LotSizeApp"]


def __getattr__(name: str):
    if name == "LotSizeApp":
        from .app import LotSizeApp

        return LotSizeApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
