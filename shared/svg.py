"""SVG element emitters shared by the feature renderers and the room assembler."""
from xml.sax.saxutils import escape

from .types import Point
from .geometry import fmt_num

_ATTR_ENTITIES = {'"': "&quot;"}


def svg_attr(value) -> str:
    """Escape a value for use inside a double-quoted SVG attribute."""
    return escape(str(value), _ATTR_ENTITIES)


def svg_line(p1: Point, p2: Point, stroke: str, width: float, cls: str | None = None,
             extra: str = "") -> str:
    """<line> from p1 to p2. *extra* is appended verbatim before the close."""
    c = f'class="{cls}" ' if cls else ""
    return (f'<line {c}x1="{fmt_num(p1[0])}" y1="{fmt_num(p1[1])}"'
            f' x2="{fmt_num(p2[0])}" y2="{fmt_num(p2[1])}"'
            f' stroke="{stroke}" stroke-width="{fmt_num(width)}"{extra}/>')


def svg_text(p: Point, label: str, size: float, fill: str, cls: str | None = None,
             rotate: float | None = None, extra: str = "") -> str:
    """Centered <text>, optionally rotated about its anchor point."""
    c = f'class="{cls}" ' if cls else ""
    x, y = fmt_num(p[0]), fmt_num(p[1])
    r = f' transform="rotate({fmt_num(rotate)}, {x}, {y})"' if rotate is not None else ""
    return (f'<text {c}x="{x}" y="{y}" text-anchor="middle"{extra}'
            f' font-family="Arial, sans-serif" font-size="{fmt_num(size)}" fill="{fill}"{r}>'
            f'{escape(label)}</text>')
