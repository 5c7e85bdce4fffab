"""Room assembler: wall outline, feature groups, label and dimensions.

The document root carries data-room-id, data-room-label and data-scale
so the review surface never has to re-derive scale from geometry.
"""
from shared.geometry import fmt_dist, fmt_num
from shared.svg import svg_attr, svg_line, svg_text
from floorplan.constants import (
    MARGIN, PIXELS_PER_FOOT, WALL_WIDTH, WALL_COLOR,
    LABEL_FONT_SIZE, LABEL_COLOR,
    DIM_OFFSET, DIM_TEXT_GAP, DIM_TICK, DIM_FONT_SIZE, DIM_COLOR, DIM_LINE_WIDTH,
)

# Feature groups, in document order.
FEATURE_GROUPS = ("doors", "windows", "closets")


def _indent(fragment: str, depth: int) -> list[str]:
    pad = "  " * depth
    return [pad + line for line in fragment.split("\n")]


def dim_line_h(out, x1, x2, y, label):
    """Horizontal dimension line with vertical tick marks, label below."""
    out.append(svg_line((x1, y), (x2, y), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_line((x1, y - DIM_TICK), (x1, y + DIM_TICK), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_line((x2, y - DIM_TICK), (x2, y + DIM_TICK), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_text(((x1 + x2) / 2, y + DIM_TEXT_GAP), label, DIM_FONT_SIZE, DIM_COLOR,
                        cls="dim-width"))


def dim_line_v(out, x, y1, y2, label):
    """Vertical dimension line with horizontal tick marks, label rotated 90 degrees."""
    out.append(svg_line((x, y1), (x, y2), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_line((x - DIM_TICK, y1), (x + DIM_TICK, y1), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_line((x - DIM_TICK, y2), (x + DIM_TICK, y2), DIM_COLOR, DIM_LINE_WIDTH))
    out.append(svg_text((x + DIM_TEXT_GAP, (y1 + y2) / 2), label, DIM_FONT_SIZE, DIM_COLOR,
                        cls="dim-height", rotate=90))


def render_walls(room_width_px, room_height_px) -> str:
    """Four exterior wall segments, clockwise from the NW corner."""
    x0, y0 = MARGIN, MARGIN
    x1, y1 = MARGIN + room_width_px, MARGIN + room_height_px
    extra = ' data-wall-type="exterior"'
    out = ['<g class="walls">']
    for name, a, b in [
        ("north", (x0, y0), (x1, y0)),
        ("east",  (x1, y0), (x1, y1)),
        ("south", (x1, y1), (x0, y1)),
        ("west",  (x0, y1), (x0, y0)),
    ]:
        out.append("  " + svg_line(a, b, WALL_COLOR, WALL_WIDTH, cls=f"wall wall-{name}", extra=extra))
    out.append('</g>')
    return "\n".join(out)


def render_label(room_label, room_width_px, room_height_px) -> str:
    center = (MARGIN + room_width_px / 2, MARGIN + room_height_px / 2)
    return svg_text(center, room_label, LABEL_FONT_SIZE, LABEL_COLOR, cls="room-label",
                    extra=' dominant-baseline="central"')


def render_dimensions(width_ft, height_ft, room_width_px, room_height_px) -> str:
    """Width beneath the south wall, height beside the east wall."""
    south_y = MARGIN + room_height_px
    east_x = MARGIN + room_width_px
    out = []
    dim_line_h(out, MARGIN, east_x, south_y + DIM_OFFSET, fmt_dist(width_ft))
    dim_line_v(out, east_x + DIM_OFFSET, MARGIN, south_y, fmt_dist(height_ft))
    return "\n".join(['<g class="dimensions">'] + ["  " + s for s in out] + ['</g>'])


def render_room_svg(width_ft, height_ft, groups, room_label, room_id) -> str:
    """Assemble the complete diagram document.

    groups maps each name in FEATURE_GROUPS to a list of feature fragments.
    """
    room_width_px = width_ft * PIXELS_PER_FOOT
    room_height_px = height_ft * PIXELS_PER_FOOT
    vb_w = room_width_px + 2 * MARGIN
    vb_h = room_height_px + 2 * MARGIN
    rid = svg_attr(room_id)

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {fmt_num(vb_w)} {fmt_num(vb_h)}"'
               f' data-room-id="{rid}" data-room-label="{svg_attr(room_label)}"'
               f' data-scale="{PIXELS_PER_FOOT}">')
    out.append(f'  <g class="room" data-room-id="{rid}">')
    out.extend(_indent(render_walls(room_width_px, room_height_px), 2))
    for name in FEATURE_GROUPS:
        out.append(f'    <g class="{name}">')
        for fragment in groups.get(name, ()):
            out.extend(_indent(fragment, 3))
        out.append('    </g>')
    out.extend(_indent(render_label(room_label, room_width_px, room_height_px), 2))
    out.extend(_indent(render_dimensions(width_ft, height_ft, room_width_px, room_height_px), 2))
    out.append('  </g>')
    out.append('</svg>')
    return "\n".join(out)
