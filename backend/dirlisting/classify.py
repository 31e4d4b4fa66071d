"""Content type → icon class mapping for listing rows.

The icon class is the CSS class on the first table cell of each row; the
page shell carries one SVG icon per class.
"""

from __future__ import annotations

from enum import Enum

DIRECTORY_TYPE = "directory"


class IconClass(str, Enum):
    DIRECTORY = "ft_directory"
    IMAGE = "ft_image"
    PDF = "ft_pdf"
    HTML = "ft_html"
    PARENT = "ft_parent"  # only ever set on the synthetic parent row
    NONE = ""


def icon_class(content_type: str) -> IconClass:
    """Classify a content type. First matching rule wins."""
    if content_type == DIRECTORY_TYPE:
        return IconClass.DIRECTORY
    if content_type.startswith("image/"):
        return IconClass.IMAGE
    if content_type.endswith("pdf"):
        return IconClass.PDF
    if content_type.endswith("html"):
        return IconClass.HTML
    return IconClass.NONE
