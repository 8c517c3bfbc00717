import math
import unicodedata
from typing import Tuple

_LATEX_SPECIALS = {
    '\\': r'\textbackslash{}',
    '&': r'\&',
    '%': r'\%',
    '$': r'\$',
    '#': r'\#',
    '_': r'\_',
    '{': r'\{',
    '}': r'\}',
    '~': r'\textasciitilde{}',
    '^': r'\textasciicircum{}',
}


def latex_escape(text: str) -> str:
    """Escape plain text for use inside a LaTeX document body."""
    text = unicodedata.normalize('NFC', text)
    text = ''.join(ch for ch in text if unicodedata.category(ch) != 'Mn')
    return ''.join(_LATEX_SPECIALS.get(ch, ch) for ch in text)


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def colour_key(colour: Tuple[float, float, float, float]) -> Tuple[int, int, int]:
    r, g, b, _ = colour
    return (round(r * 255), round(g * 255), round(b * 255))
