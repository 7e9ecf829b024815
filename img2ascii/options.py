"""Options for converting a whole image."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConvertOptions:
    """How an image is sized and rendered as text.

    ``fit_screen``, ``stretched_screen`` and ``colored`` only take effect on a
    terminal.
    """

    ratio: float = 1.0
    fixed_width: int = -1
    fixed_height: int = -1
    fit_screen: bool = True
    stretched_screen: bool = False
    colored: bool = True
    reversed: bool = False