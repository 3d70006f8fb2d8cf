from .blocks import render_block, render_blocks
from .content import render_content, render_prose
from .layout import render_document, render_preview_banner, page_title

__all__ = [
    "render_block", "render_blocks",
    "render_content", "render_prose",
    "render_document", "render_preview_banner", "page_title",
]
