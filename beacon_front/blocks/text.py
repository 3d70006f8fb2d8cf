"""Blocs texte — paragraph, heading, list, list-item, quote."""
from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import BlockAttributes, css_classes, html_attr, style_attr

DROP_CAP_CLASSES = "first-letter:text-5xl first-letter:font-bold first-letter:float-left first-letter:mr-3 first-letter:mt-1"

HEADING_CLASSES = {
    1: "text-4xl md:text-5xl font-bold mb-6 mt-8",
    2: "text-3xl md:text-4xl font-bold mb-4 mt-12",
    3: "text-2xl md:text-3xl font-semibold mb-3 mt-8",
    4: "text-xl md:text-2xl font-semibold mb-2 mt-6",
    5: "text-lg md:text-xl font-medium mb-2 mt-4",
    6: "text-base md:text-lg font-medium mb-2 mt-4",
}


# ── core/paragraph ──────────────────────────────────────────────────────────

class ParagraphAttributes(BlockAttributes):
    content: str = ""
    drop_cap: bool = Field(default=False, alias="dropCap")
    align: Optional[Literal["left", "center", "right"]] = None
    text_color: Optional[str] = Field(default=None, alias="textColor")
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")


def render_paragraph(a: ParagraphAttributes, inner_html: Optional[str], class_name: str) -> str:
    if not a.content:
        return ""
    cls = css_classes(
        "leading-relaxed mb-4",
        f"text-{a.align}" if a.align else "",
        DROP_CAP_CLASSES if a.drop_cap else "",
        f"text-{a.text_color}" if a.text_color else "text-slate-700",
        f"bg-{a.background_color}" if a.background_color else "",
        class_name,
    )
    style = style_attr({
        "color":            a.style.color.text,
        "background-color": a.style.color.background,
        "font-size":        a.style.typography.font_size,
        "line-height":      a.style.typography.line_height,
    })
    return f'<p class="{cls}"{style}>{a.content}</p>'


# ── core/heading ────────────────────────────────────────────────────────────

class HeadingAttributes(BlockAttributes):
    content: str = ""
    level: int = 2
    text_align: Optional[Literal["left", "center", "right"]] = Field(default=None, alias="textAlign")
    anchor: Optional[str] = None
    text_color: Optional[str] = Field(default=None, alias="textColor")

    @field_validator("level", mode="before")
    @classmethod
    def _clamp_level(cls, v):
        try:
            return min(6, max(1, int(v)))
        except (TypeError, ValueError):
            return 2


def render_heading(a: HeadingAttributes, inner_html: Optional[str], class_name: str) -> str:
    if not a.content:
        return ""
    tag = f"h{a.level}"
    cls = css_classes(
        "font-playfair scroll-mt-20",
        HEADING_CLASSES[a.level],
        f"text-{a.text_align}" if a.text_align else "",
        f"text-{a.text_color}" if a.text_color else "text-slate-800",
        class_name,
    )
    style = style_attr({
        "color":            a.style.color.text,
        "background-color": a.style.color.background,
        "font-size":        a.style.typography.font_size,
        "font-weight":      a.style.typography.font_weight,
    })
    return f'<{tag}{html_attr("id", a.anchor)} class="{cls}"{style}>{a.content}</{tag}>'


# ── core/list + core/list-item ──────────────────────────────────────────────

class ListAttributes(BlockAttributes):
    ordered: bool = False
    values: Optional[str] = None
    start: Optional[int] = None
    reversed: bool = False


def render_list(a: ListAttributes, inner_html: Optional[str], class_name: str) -> str:
    # enfants list-item (format moderne) sinon `values` (HTML legacy)
    body = inner_html if inner_html is not None else a.values
    if not body:
        return ""
    cls = css_classes(
        "my-6 pl-6 text-slate-700 space-y-2",
        "list-decimal" if a.ordered else "list-disc",
        class_name,
    )
    style = style_attr({"font-size": a.style.typography.font_size})
    if a.ordered:
        extra = html_attr("start", a.start) + html_attr("reversed", a.reversed)
        return f'<ol class="{cls}"{extra}{style}>{body}</ol>'
    return f'<ul class="{cls}"{style}>{body}</ul>'


class ListItemAttributes(BlockAttributes):
    content: Optional[str] = None


def render_list_item(a: ListItemAttributes, inner_html: Optional[str], class_name: str) -> str:
    cls = css_classes("text-slate-700", class_name)
    style = style_attr({"font-size": a.style.typography.font_size})
    if inner_html is not None:
        # sous-liste imbriquée
        label = f"<span>{a.content}</span>" if a.content else ""
        return f'<li class="{cls}"{style}>{label}{inner_html}</li>'
    if not a.content:
        return ""
    return f'<li class="{cls}"{style}>{a.content}</li>'


# ── core/quote ──────────────────────────────────────────────────────────────

class QuoteAttributes(BlockAttributes):
    value: Optional[str] = None
    citation: Optional[str] = None
    align: Optional[Literal["left", "center", "right"]] = None


def render_quote(a: QuoteAttributes, inner_html: Optional[str], class_name: str) -> str:
    is_large = "is-style-large" in class_name
    cls = css_classes(
        "my-8",
        "text-2xl" if is_large else "text-lg",
        "border-l-0 text-center" if is_large else "border-l-4 border-amber-500 pl-6",
        "" if is_large else "bg-slate-50 py-4 pr-6",
        "rounded-r-lg",
        f"text-{a.align}" if a.align else "",
        class_name,
    )
    style = style_attr({
        "color":            a.style.color.text,
        "background-color": a.style.color.background,
        "font-size":        a.style.typography.font_size,
    })

    if inner_html is not None:
        body = f'<div class="space-y-4">{inner_html}</div>'
    elif a.value:
        body = f'<div class="text-slate-600 italic">{a.value}</div>'
    else:
        body = ""

    cite = ""
    if a.citation:
        cite_cls = css_classes("block mt-4 text-sm text-slate-500 not-italic", "font-semibold" if is_large else "")
        cite = f'<cite class="{cite_cls}">&mdash; <span>{a.citation}</span></cite>'

    return f'<blockquote class="{cls}"{style}>{body}{cite}</blockquote>'
