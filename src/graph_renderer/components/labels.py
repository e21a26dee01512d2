"""
Label and identifier formatting for DOT output.

Names and titles are HTML-escaped and wrapped at ``WRAP_WIDTH`` columns so
that every label stays visually bounded; wrap points become ``<BR />``.
"""

import html
import textwrap

WRAP_WIDTH = 16
LINE_BREAK = "<BR />"

LABEL_TEMPLATE = (
    '<<TABLE border="0" cellborder="0">'
    '<TR><TD WIDTH="144px" HEIGHT="144px">{image}</TD></TR>'
    '<TR><TD><B><FONT POINT-SIZE="45">{name}</FONT></B>{br}'
    '<FONT POINT-SIZE="30">{title}</FONT></TD></TR>'
    "</TABLE>>"
)


def sanitize_id(name: str) -> str:
    """Quote *name* for use as a DOT identifier unless it is quoted already."""
    if name.startswith('"') and name.endswith('"') and len(name) > 1:
        return name
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_text(text: str, width: int = WRAP_WIDTH) -> str:
    """Escape *text* and wrap it on whitespace; long words are never split."""
    escaped = html.escape(text)
    lines = textwrap.wrap(escaped, width=width, break_long_words=False, break_on_hyphens=False)
    if not lines:
        return escaped
    return LINE_BREAK.join(lines)


def image_tag(image: str | None) -> str:
    if not image:
        return ""
    return f'<IMG SRC="{html.escape(image)}" SCALE="TRUE"/>'


def node_label(name: str, title: str, image: str | None) -> str:
    return LABEL_TEMPLATE.format(
        image=image_tag(image),
        name=format_text(name),
        title=format_text(title),
        br=LINE_BREAK,
    )
