"""Feature renderers for doors, windows and closets.

Each renderer maps its feature onto the wall and returns one SVG <g>
fragment: a white gap line that interrupts the wall outline, plus the
feature's symbol.
"""
from shared.types import Span, Wall
from shared.geometry import offset_span, span_length, fmt_num, fmt_exact
from shared.svg import svg_line
from floorplan.constants import (
    PIXELS_PER_FOOT, WALL_COLOR, GAP_COLOR, WALL_GAP_WIDTH,
    PANE_OFFSET, PANE_WIDTH, SLIDING_OFFSET, SLIDING_WIDTH, DOOR_ARC_WIDTH,
    CLOSET_DASH,
)
from floorplan.mapping import WALL_EDGES, map_feature, door_swing, inward_point


def feature_attrs(wall: Wall, feature) -> str:
    """data-* attributes identifying a feature for the review surface."""
    return (f'data-wall="{wall}" data-position="{fmt_exact(feature.position)}"'
            f' data-width="{fmt_exact(feature.width)}"')


def wall_gap(out, span: Span):
    """White stroke over the wall, slightly wider than it, across the opening."""
    out.append(svg_line(span.start, span.end, GAP_COLOR, WALL_GAP_WIDTH, cls="wall-gap"))


def sliding_glyph(out, span: Span):
    """Gap plus two panel lines either side of the span's centerline."""
    wall_gap(out, span)
    for off in (-SLIDING_OFFSET, SLIDING_OFFSET):
        s = offset_span(span, off)
        out.append(svg_line(s.start, s.end, WALL_COLOR, SLIDING_WIDTH))


def render_door(feature, wall: Wall, room_width_px: float, room_height_px: float) -> str:
    """Door group: gap plus a quarter-circle swing arc, or a sliding glyph."""
    span = map_feature(feature, wall, room_width_px, room_height_px)
    attrs = feature_attrs(wall, feature)

    if feature.is_sliding:
        out = [f'<g class="door sliding-door" {attrs}>']
        sliding_glyph(out, span)
        out.append('</g>')
        return "\n".join(out)

    swing = door_swing(wall, feature.swing_direction)
    hinge, free = (span.end, span.start) if swing.hinge_at_end else (span.start, span.end)
    r = span_length(span)
    # Arc runs from the free edge to the hinge swung one door width into the room.
    tip = inward_point(hinge, wall, r)
    direction = "right" if feature.swing_direction == "right" else "left"

    out = [f'<g class="door" {attrs} data-swing="{direction}"'
           f' data-hinge="{fmt_num(hinge[0])},{fmt_num(hinge[1])}">']
    wall_gap(out, span)
    out.append(f'<path class="door-arc" d="M {fmt_num(free[0])} {fmt_num(free[1])}'
               f' A {fmt_num(r)} {fmt_num(r)} 0 0 {swing.sweep} {fmt_num(tip[0])} {fmt_num(tip[1])}"'
               f' fill="none" stroke="{WALL_COLOR}" stroke-width="{DOOR_ARC_WIDTH}"/>')
    out.append('</g>')
    return "\n".join(out)


def render_window(feature, wall: Wall, room_width_px: float, room_height_px: float) -> str:
    """Window group: gap plus three glazing lines at -k, 0, +k."""
    span = map_feature(feature, wall, room_width_px, room_height_px)
    out = [f'<g class="window" {feature_attrs(wall, feature)}>']
    wall_gap(out, span)
    for off in (-PANE_OFFSET, 0, PANE_OFFSET):
        s = offset_span(span, off)
        out.append(svg_line(s.start, s.end, WALL_COLOR, PANE_WIDTH))
    out.append('</g>')
    return "\n".join(out)


def closet_rect(span: Span, wall: Wall, depth_px: float) -> tuple[float, float, float, float]:
    """(x, y, width, height) of a closet box flush to the wall's interior face."""
    edge = WALL_EDGES[wall]
    along = span_length(span)
    if edge.axis == "horizontal":
        y = span.start[1] if edge.inward > 0 else span.start[1] - depth_px
        return (span.start[0], y, along, depth_px)
    x = span.start[0] if edge.inward > 0 else span.start[0] - depth_px
    return (x, span.start[1], depth_px, along)


def render_closet(feature, wall: Wall, room_width_px: float, room_height_px: float) -> str:
    """Closet group: dashed footprint, gap, and a sliding glyph for sliding doors."""
    span = map_feature(feature, wall, room_width_px, room_height_px)
    x, y, w, h = closet_rect(span, wall, feature.depth * PIXELS_PER_FOOT)

    out = [f'<g class="closet" {feature_attrs(wall, feature)}'
           f' data-depth="{fmt_exact(feature.depth)}">']
    out.append(f'<rect class="closet-outline" x="{fmt_num(x)}" y="{fmt_num(y)}"'
               f' width="{fmt_num(w)}" height="{fmt_num(h)}" stroke="{WALL_COLOR}"'
               f' stroke-width="1" stroke-dasharray="{CLOSET_DASH}" fill="none"/>')
    wall_gap(out, span)
    if feature.is_sliding:
        out.append('<g class="sliding-door">')
        sliding_glyph(out, span)
        out.append('</g>')
    out.append('</g>')
    return "\n".join(out)
