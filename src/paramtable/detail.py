"""Markup for the description column of a leaf row.

Only the fields that are present are emitted, in a fixed order: header,
description, default value, options.  Fragments are joined with a line
break and nothing is emitted for an absent field.
"""

import html

from paramtable.config import DETAIL_LABELS
from paramtable.schema import LeafDetail

SEPARATOR = "<br/> "


def render_detail(detail: LeafDetail, escape: bool = True) -> str:
    """Render a leaf's detail fields as an HTML fragment."""

    def _text(value: str) -> str:
        return html.escape(value) if escape else value

    parts: list[str] = []

    if detail.header:
        parts.append(f'<strong style="font-size: 15px">{_text(detail.header)}</strong>')

    if detail.description:
        parts.append(f'<em style="color: #888888">{_text(detail.description)}</em>')

    if detail.default_value:
        parts.append(f"<b>{DETAIL_LABELS['default']}: <ins>{_text(detail.default_value)}</ins></b>")

    # Options keep their document order
    if detail.options is not None:
        items = "".join(f"<li>{_text(option)}</li>" for option in detail.options)
        parts.append(f"<b>{DETAIL_LABELS['options']}:</b> <ul>{items}</ul>")

    return SEPARATOR.join(parts)
