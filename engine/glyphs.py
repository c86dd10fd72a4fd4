# engine/glyphs.py

"""
Glyphs used in enemy flavor messages.

Each glyph has a unicode form and an ASCII fallback for terminals that
cannot render the former.
"""

from typing import Dict, Tuple

from settings import USE_UNICODE_GLYPHS

_GLYPHS: Dict[str, Tuple[str, str]] = {
    "shield": ("\U0001F6E1", ")"),
    "ice": ("❄", "*"),
    "fire": ("\U0001F525", "^"),
}

use_unicode: bool = USE_UNICODE_GLYPHS


def set_unicode(enabled: bool) -> None:
    global use_unicode
    use_unicode = enabled


def glyph(name: str) -> str:
    unicode_form, ascii_form = _GLYPHS[name]
    return unicode_form if use_unicode else ascii_form


def shield() -> str:
    return glyph("shield")


def ice() -> str:
    return glyph("ice")


def fire() -> str:
    return glyph("fire")
