"""
Utility to render a classified block into an HTML <table> string.
"""

from __future__ import annotations

from typing import List, Optional


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def render_block_html(
    title: Optional[str],
    header: List[str],
    data: List[List[str]],
) -> str:
    """
    Render a block's title, header row and data rows into an HTML
    ``<table>`` string.  The title becomes the ``<caption>``.
    """
    parts: List[str] = ['<table border="1" cellpadding="5" cellspacing="0">']

    if title:
        parts.append(f"  <caption>{_escape_html(title)}</caption>")

    # <thead>
    if header:
        parts.append("  <thead>")
        parts.append("    <tr>")
        for val in header:
            parts.append(f"      <th>{_escape_html(val)}</th>")
        parts.append("    </tr>")
        parts.append("  </thead>")

    # <tbody>
    if data:
        parts.append("  <tbody>")
        for row in data:
            parts.append("    <tr>")
            for val in row:
                parts.append(f"      <td>{_escape_html(val)}</td>")
            parts.append("    </tr>")
        parts.append("  </tbody>")

    parts.append("</table>")
    return "\n".join(parts)
