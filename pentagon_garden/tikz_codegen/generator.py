"""TikZ renderer for generators, orbit packings and grips."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

from .utils import colour_key, format_float, latex_escape
from ..colours import Colour
from ..geom import Curvature, RotCircle
from ..render import generator_outlines, grip_cut_circles, grip_markers, horizon_outline
from ..search.model import Grip, OrbitResult, RenderCircle

DEFAULT_SCALE = 2.0
MIN_RADIUS = 1e-6

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  pg/line width/.store in=\pgLW,      pg/line width=0.8pt,
  pg/thin width/.store in=\pgLWthin,  pg/thin width=0.4pt,
  orbit/.style={draw=none},
  generator/.style={line width=\pgLW},
  grip/.style={line width=\pgLWthin, draw=lightgray},
  cut/.style={line width=\pgLWthin, dash pattern=on 2pt off 1pt},
  horizon/.style={line width=\pgLWthin, draw=lightgray},
}
\pgfdeclarelayer{bg}\pgfdeclarelayer{fg}\pgfsetlayers{bg,main,fg}
\begin{document}
%s
%s
\end{document}
"""


class _Palette:
    """Assigns a ``\\definecolor`` name to each distinct 8-bit colour."""

    def __init__(self) -> None:
        self._names: Dict[Tuple[int, int, int], str] = {}

    def name(self, colour: Colour) -> str:
        key = colour_key(colour)
        if key not in self._names:
            self._names[key] = f"pg{len(self._names)}"
        return self._names[key]

    def definitions(self) -> List[str]:
        return [
            f"  \\definecolor{{{name}}}{{RGB}}{{{r},{g},{b}}}"
            for (r, g, b), name in self._names.items()
        ]


def _drawable(circle: RenderCircle) -> bool:
    centre_ok = math.isfinite(circle.centre.x) and math.isfinite(circle.centre.y)
    return centre_ok and math.isfinite(circle.radius) and circle.radius > MIN_RADIUS


def _circle_cmd(command: str, style: str, circle: RenderCircle) -> str:
    return "    \\{cmd}[{style}] ({x}, {y}) circle ({r});".format(
        cmd=command,
        style=style,
        x=format_float(circle.centre.x),
        y=format_float(circle.centre.y),
        r=format_float(circle.radius),
    )


def generate_tikz_document(
    generators: Sequence[RotCircle],
    *,
    orbit: Optional[OrbitResult] = None,
    grips: Sequence[Grip] = (),
    curvature: Optional[Curvature] = None,
    grip_radius: float = 0.05,
    grip_cuts: bool = False,
    scale: float = DEFAULT_SCALE,
    title: Optional[str] = None,
) -> str:
    """Render a standalone LaTeX document containing one picture."""

    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_escape(title.strip()) + "}\\par\\vspace{4pt}\n"
    tikz_code = generate_tikz_code(
        generators,
        orbit=orbit,
        grips=grips,
        curvature=curvature,
        grip_radius=grip_radius,
        grip_cuts=grip_cuts,
        scale=scale,
    )
    return standalone_tpl % (header, tikz_code)


def generate_tikz_code(
    generators: Sequence[RotCircle],
    *,
    orbit: Optional[OrbitResult] = None,
    grips: Sequence[Grip] = (),
    curvature: Optional[Curvature] = None,
    grip_radius: float = 0.05,
    grip_cuts: bool = False,
    scale: float = DEFAULT_SCALE,
) -> str:
    """Emit a ``tikzpicture`` with orbit discs below, outlines and grips above."""

    if curvature is None:
        curvature = generators[0].curvature if generators else Curvature.EUCLIDEAN

    palette = _Palette()
    body: List[str] = []

    body.append("  \\begin{pgfonlayer}{bg}")
    horizon = horizon_outline(curvature)
    if horizon is not None:
        body.append(_circle_cmd("draw", "horizon", horizon))
    if orbit is not None:
        for circle in orbit.circles:
            if _drawable(circle):
                body.append(_circle_cmd("fill", f"orbit, fill={palette.name(circle.colour)}", circle))
    body.append("  \\end{pgfonlayer}")

    body.append("  \\begin{pgfonlayer}{main}")
    for outline in generator_outlines(generators):
        if _drawable(outline):
            body.append(_circle_cmd("draw", f"generator, draw={palette.name(outline.colour)}", outline))
    body.append("  \\end{pgfonlayer}")

    body.append("  \\begin{pgfonlayer}{fg}")
    if grip_cuts:
        for cut in grip_cut_circles(grips, generators, curvature):
            if _drawable(cut):
                body.append(_circle_cmd("draw", f"cut, draw={palette.name(cut.colour)}", cut))
    for marker in grip_markers(grips, curvature, grip_radius):
        if _drawable(marker):
            body.append(_circle_cmd("filldraw", f"grip, fill={palette.name(marker.colour)}", marker))
    body.append("  \\end{pgfonlayer}")

    lines = [f"\\begin{{tikzpicture}}[scale={format_float(scale)}]"]
    lines.extend(palette.definitions())
    lines.extend(body)
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


__all__ = ["generate_tikz_code", "generate_tikz_document"]
