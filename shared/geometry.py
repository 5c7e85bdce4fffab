"""Pure span geometry and formatting helpers."""
import math
from .types import Point, Span

# ============================================================
# Geometry Utilities
# ============================================================
def off_pt(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

def span_normal(span: Span) -> Point:
    """Unit vector perpendicular to the span, pointing toward +X or +Y."""
    return (0.0, 1.0) if span.axis == "horizontal" else (1.0, 0.0)

def span_length(span: Span) -> float:
    """Length of a span in pixels."""
    dx = span.end[0]-span.start[0]; dy = span.end[1]-span.start[1]
    return math.sqrt(dx**2+dy**2)

def offset_span(span: Span, d: float) -> Span:
    """Shift a span by d pixels perpendicular to its axis (+Y or +X for d > 0)."""
    n = span_normal(span)
    return Span(off_pt(span.start, n, d), off_pt(span.end, n, d), span.axis)

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_num(v: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros.

    160.0 -> '160', 66.60000000000001 -> '66.6'.
    """
    s = f"{round(v, 2):.2f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

def fmt_exact(v: float) -> str:
    """Shortest round-trip form of v, without a trailing '.0'.

    8.0 -> '8', 10.123456 -> '10.123456'.
    """
    s = repr(float(v))
    return s[:-2] if s.endswith(".0") else s

def fmt_dist(ft: float) -> str:
    """Format distance in feet to feet-inches string, e.g. \"2' 6\\\"\"."""
    total_in = round(ft * 12, 2)
    whole_ft = int(total_in // 12)
    remaining_in = total_in - whole_ft * 12
    in_str = f"{remaining_in:.2f}".rstrip('0').rstrip('.')
    return f"{whole_ft}' {in_str}\""
