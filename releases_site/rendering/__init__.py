"""Markdown rendering of version pages and the site index."""

from .renderer import release_name, render_index, render_released, render_unreleased

__all__ = [
    "release_name",
    "render_index",
    "render_released",
    "render_unreleased",
]
