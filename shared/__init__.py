"""Shared types, span geometry, formatting, and SVG utilities."""

from .types import Point, Wall, Axis, Span, WALLS
from .geometry import (
    off_pt, span_normal, span_length, offset_span,
    fmt_num, fmt_exact, fmt_dist,
)
from .svg import svg_line, svg_attr, svg_text
