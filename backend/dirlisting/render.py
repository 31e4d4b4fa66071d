"""HTML rendering for directory listings and trailing-slash redirects."""

from __future__ import annotations

import html
from pathlib import Path
from string import Template
from typing import Dict, List

from dirlisting.entries import Entry
from dirlisting.sorting import SortDirection, SortField, SortSpec

TEMPLATES_DIR = Path(__file__).parent / "templates"

with open(TEMPLATES_DIR / "listing.html", "r", encoding="utf-8") as _f:
    PAGE_TEMPLATE = Template(_f.read())

ROW_TEMPLATE = Template("""\
  <tr>
    <td class="$icon"></td>
    <td class="name"><a href="$url">$name</a></td>
    <td class="mtime">$mtime</td>
    <td class="size">$size</td>
    <td class="type">$type</td>
  </tr>""")

REDIRECT_TEMPLATE = Template(
    '<!DOCTYPE HTML PUBLIC "-//IETF//DTD HTML 2.0//EN"><html><head>'
    '<title>301 Moved Permanently</title></head><body><h1>Moved Permanently</h1>'
    '<p>The document has moved <a href="$location">here</a>.</p></body></html>\n'
)

# Template placeholder for each sortable column header
HEADER_PLACEHOLDERS: Dict[SortField, str] = {
    SortField.NAME: "sort_name",
    SortField.MODIFIED: "sort_mtime",
    SortField.SIZE: "sort_size",
    SortField.TYPE: "sort_type",
}


def header_links(active: SortSpec) -> Dict[str, str]:
    """Query fragment for every column header.

    The active column proposes the opposite direction so a second click
    flips the order; every other column proposes ascending.
    """
    links = {}
    for field, placeholder in HEADER_PLACEHOLDERS.items():
        if field is active.field:
            proposed = SortSpec(field, active.direction.inverted())
        else:
            proposed = SortSpec(field, SortDirection.ASCENDING)
        links[placeholder] = proposed.query()
    return links


def render_row(entry: Entry) -> str:
    esc = html.escape
    return ROW_TEMPLATE.substitute(
        icon=esc(entry.icon_class.value),
        url=esc(entry.url),
        name=esc(entry.display_name),
        mtime=esc(entry.mtime_formatted),
        size="" if entry.size is None else entry.size,
        type=esc(entry.content_type),
    )


def render_listing(path_info: str, listing: List[Entry], sort: SortSpec, host: str) -> bytes:
    """Render the full listing page.

    Args:
        path_info: Request path of the directory (unescaped).
        listing: Parent row followed by the sorted entries.
        sort: Sort state in effect, drives the header links.
        host: Host header value, shown as the page caption.

    Returns:
        UTF-8 encoded HTML document.
    """
    page = PAGE_TEMPLATE.substitute(
        title=html.escape(f"Index of {path_info}"),
        rows="\n".join(render_row(entry) for entry in listing),
        host=html.escape(host),
        **header_links(sort),
    )
    return page.encode("utf-8")


def render_redirect(location: str) -> bytes:
    return REDIRECT_TEMPLATE.substitute(location=html.escape(location)).encode("utf-8")
