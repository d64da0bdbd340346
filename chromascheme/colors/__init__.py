"""
chromascheme Color Class
========================

``Color`` is an immutable 8-bit RGB value with an optional alpha channel and a
derived HSL view.

Features
--------
- Immutable instances (frozen after initialization), hashable, comparable
- Channel values clamped to [0, 255], floats rounded half up
- HSL view computed from the stored RGB channels
- Alpha carried through every derived color untouched

Usage
-----
>>> from chromascheme.colors import Color
>>> red = Color((255, 0, 0))
>>> red.hsl
(0.0, 1.0, 0.5)
>>> red.hex
'#ff0000'
>>> Color.from_hsl(120, 1.0, 0.5).value
(0, 255, 0)
>>> Color.from_hex("#0f0") == Color((0, 255, 0))
True
"""

from .color import Color, BLACK, WHITE

__all__ = ['Color', 'BLACK', 'WHITE']
