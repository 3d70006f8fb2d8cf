"""
Helpers communs aux templates : contexte de rendu, en-tête, fil d'Ariane,
image mise en avant, dates, métadonnées de page.

Texte WordPress « plat » (titres, noms) → échappé. Champs HTML (content,
excerpt, courseDescription…) → insérés tels quels (voir renderer.content).
"""
import re
from datetime import datetime
from html import escape, unescape
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..blocks.registry import BlockRegistry
from ..core.schemas import ContentType, MediaEdge
from ..renderer.blocks import render_blocks

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")

HEADER_CLASSES = "bg-gradient-to-br from-slate-900 via-blue-900 to-slate-800 text-white py-16 px-6"
BACK_LINK_CLASSES = "inline-flex items-center gap-2 text-slate-600 hover:text-slate-800 font-medium"

DESCRIPTION_LENGTH = 160


class RenderContext(BaseModel):
    """Dépendances d'un rendu de template (injectées par la route)."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    blocks: BlockRegistry
    preview: bool = False

    def render_body(self, node: Any, size: str = "lg") -> str:
        """editorBlocks du nœud, repli sur son HTML `content`."""
        return render_blocks(
            getattr(node, "editor_blocks", None),
            self.blocks,
            fallback_content=getattr(node, "content", None),
            size=size,
        )


def esc(value: Any) -> str:
    return escape(str(value)) if value is not None else ""


def strip_tags(html: Optional[str]) -> str:
    """HTML → texte brut (balises retirées, entités décodées, espaces normalisés)."""
    if not html:
        return ""
    return _SPACE_RE.sub(" ", unescape(_TAG_RE.sub("", html))).strip()


def excerpt(html: Optional[str], length: int = DESCRIPTION_LENGTH) -> str:
    return strip_tags(html)[:length]


def format_date(value: Optional[str]) -> str:
    """"2024-01-15T10:00:00" → "January 15, 2024" ("" si illisible)."""
    if not value:
        return ""
    try:
        d = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return f"{d:%B} {d.day}, {d.year}"


# ── Fragments ───────────────────────────────────────────────────────────────

def breadcrumb(trail: List[Tuple[str, Optional[str]]], current: str, current_cls: str = "text-white") -> str:
    """trail = [(label, href), ...] ; `current` = dernier élément (non lié)."""
    items = ['<li><a href="/" class="hover:text-white">Home</a></li>']
    for label, href in trail:
        items.append("<li>/</li>")
        items.append(f'<li><a href="{esc(href or "#")}" class="hover:text-white">{esc(label)}</a></li>')
    items.append("<li>/</li>")
    items.append(f'<li class="{current_cls}">{esc(current)}</li>')
    return (
        '<nav class="mb-6"><ol class="flex items-center gap-2 text-sm text-blue-200">'
        + "".join(items)
        + "</ol></nav>"
    )


def page_header(inner_html: str, width: str = "max-w-4xl") -> str:
    return f'<header class="{HEADER_CLASSES}"><div class="{width} mx-auto">{inner_html}</div></header>'


def featured_image(edge: Optional[MediaEdge], fallback_alt: Optional[str] = None) -> str:
    media = edge.node if edge else None
    if media is None or not media.source_url:
        return ""
    alt = media.alt_text or fallback_alt or ""
    return (
        '<div class="relative -mt-8 mx-6"><div class="max-w-4xl mx-auto">'
        '<div class="relative aspect-video rounded-xl overflow-hidden shadow-2xl">'
        f'<img src="{esc(media.source_url)}" alt="{esc(alt)}" class="absolute inset-0 w-full h-full object-cover">'
        '</div></div></div>'
    )


def back_link(href: str, label: str, width: str = "max-w-3xl") -> str:
    return (
        f'<div class="pb-12 px-6"><div class="{width} mx-auto">'
        f'<a href="{href}" class="{BACK_LINK_CLASSES}">&larr; {label}</a>'
        '</div></div>'
    )


# ── Métadonnées ─────────────────────────────────────────────────────────────

def node_metadata(node: Any) -> Tuple[str, str]:
    """(titre, description) d'un nœud pour <title> / meta description."""
    typename = getattr(node, "typename", None)
    title = getattr(node, "title", None)
    if typename == ContentType.POST:
        return title or "Post", excerpt(getattr(node, "excerpt", None))
    if typename == ContentType.COURSE:
        return title or "Course", excerpt(getattr(node, "course_description", None))
    if typename in (ContentType.CATEGORY, ContentType.TAG):
        return getattr(node, "name", None) or typename, strip_tags(getattr(node, "description", None))
    return title or "Page", excerpt(getattr(node, "content", None))
