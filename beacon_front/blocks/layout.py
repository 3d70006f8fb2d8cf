"""Blocs de mise en page — columns, column, buttons, button, separator, spacer."""
from html import escape
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import BlockAttributes, css_classes, json_object, padding_declarations, style_attr

VERTICAL_ALIGN_CLASSES = {
    "top":    "items-start",
    "center": "items-center",
    "bottom": "items-end",
}

JUSTIFY_CLASSES = {
    "left":          "justify-start",
    "center":        "justify-center",
    "right":         "justify-end",
    "space-between": "justify-between",
}

VerticalAlign = Literal["top", "center", "bottom"]


# ── core/columns + core/column ──────────────────────────────────────────────

class ColumnsAttributes(BlockAttributes):
    vertical_alignment: VerticalAlign = Field(default="top", alias="verticalAlignment")
    is_stacked_on_mobile: bool = Field(default=True, alias="isStackedOnMobile")


def render_columns(a: ColumnsAttributes, inner_html: Optional[str], class_name: str) -> str:
    cls = css_classes(
        "flex flex-wrap",
        "flex-col md:flex-row" if a.is_stacked_on_mobile else "flex-row",
        VERTICAL_ALIGN_CLASSES[a.vertical_alignment],
        "my-8",
        class_name,
    )
    gap = a.style.spacing.block_gap or "1.5rem"
    return f'<div class="{cls}"{style_attr({"gap": gap})}>{inner_html or ""}</div>'


class ColumnAttributes(BlockAttributes):
    width: Optional[str] = None
    vertical_alignment: Optional[VerticalAlign] = Field(default=None, alias="verticalAlignment")


def render_column(a: ColumnAttributes, inner_html: Optional[str], class_name: str) -> str:
    if a.width:
        decls = {"flex-basis": a.width, "flex-grow": 0, "flex-shrink": 0}
    else:
        decls = {"flex": "1 1 0%"}
    decls.update(padding_declarations(a.style.spacing.padding))
    decls["background-color"] = a.style.color.background

    cls = css_classes(
        "min-w-0",
        VERTICAL_ALIGN_CLASSES[a.vertical_alignment] if a.vertical_alignment else "",
        class_name,
    )
    return f'<div class="{cls}"{style_attr(decls)}>{inner_html or ""}</div>'


# ── core/buttons + core/button ──────────────────────────────────────────────

class ButtonsLayout(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    type: Optional[str] = None
    justify_content: Optional[Literal["left", "center", "right", "space-between"]] = Field(
        default=None, alias="justifyContent")
    orientation: Optional[Literal["horizontal", "vertical"]] = None


class ButtonsAttributes(BlockAttributes):
    layout: Optional[ButtonsLayout] = None

    @field_validator("layout", mode="before")
    @classmethod
    def _layout(cls, v):
        return json_object(v)


def render_buttons(a: ButtonsAttributes, inner_html: Optional[str], class_name: str) -> str:
    layout = a.layout or ButtonsLayout()
    cls = css_classes(
        "flex flex-wrap",
        "flex-col" if layout.orientation == "vertical" else "flex-row",
        JUSTIFY_CLASSES[layout.justify_content] if layout.justify_content else "justify-start",
        "my-6",
        class_name,
    )
    gap = a.style.spacing.block_gap or "1rem"
    return f'<div class="{cls}"{style_attr({"gap": gap})}>{inner_html or ""}</div>'


class ButtonAttributes(BlockAttributes):
    text: Optional[str] = None
    url: Optional[str] = None
    link_target: Optional[str] = Field(default=None, alias="linkTarget")
    rel: Optional[str] = None
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    text_color: Optional[str] = Field(default=None, alias="textColor")
    gradient: Optional[str] = None
    width: Optional[int] = None


def render_button(a: ButtonAttributes, inner_html: Optional[str], class_name: str) -> str:
    if not a.text:
        return ""
    is_outline = "is-style-outline" in class_name
    s = a.style

    decls = {}
    if a.gradient:
        decls["background"] = a.gradient
    elif s.color.background:
        decls["background-color"] = s.color.background
    elif a.background_color and not is_outline:
        decls["background-color"] = a.background_color
    decls["color"] = s.color.text or a.text_color
    decls["border-radius"] = s.border.radius
    decls["border-width"] = s.border.width
    if s.border.color:
        decls["border-color"] = s.border.color
        decls["border-style"] = "solid"
    decls.update(padding_declarations(s.spacing.padding))
    if a.width:
        decls["width"] = f"{a.width}%"

    cls = css_classes(
        "inline-block px-6 py-3 rounded-lg font-semibold text-center transition-all duration-200",
        "border-2 border-blue-600 text-blue-600 hover:bg-blue-600 hover:text-white"
        if is_outline else "bg-blue-600 text-white hover:bg-blue-700",
        class_name,
    )
    label = f'<span class="{cls}"{style_attr(decls)}>{a.text}</span>'

    if not a.url:
        return label
    # lien interne : pas de target / rel
    if a.url.startswith(("/", "#")):
        return f'<a href="{escape(a.url)}" class="no-underline">{label}</a>'

    rel = a.rel or ("noopener noreferrer" if a.link_target == "_blank" else None)
    target = f' target="{escape(a.link_target)}"' if a.link_target else ""
    rel_attr = f' rel="{escape(rel)}"' if rel else ""
    return f'<a href="{escape(a.url)}"{target}{rel_attr} class="no-underline">{label}</a>'


# ── core/separator + core/spacer ────────────────────────────────────────────

class SeparatorAttributes(BlockAttributes):
    opacity: Optional[str] = None


def render_separator(a: SeparatorAttributes, inner_html: Optional[str], class_name: str) -> str:
    style = style_attr({"background-color": a.style.color.background, "opacity": a.opacity})
    if "is-style-dots" in class_name:
        cls = css_classes(
            "my-8 border-0 h-auto text-center bg-transparent",
            "before:content-['···'] before:text-slate-400 before:text-2xl before:tracking-[0.5em]",
            class_name,
        )
    else:
        cls = css_classes(
            "my-8 border-0 h-px bg-slate-300",
            "w-full" if "is-style-wide" in class_name else "w-24 mx-auto",
            class_name,
        )
    return f'<hr class="{escape(cls)}"{style}>'


class SpacerAttributes(BlockAttributes):
    height: str = "100px"

    @field_validator("height", mode="before")
    @classmethod
    def _height(cls, v):
        # anciens contenus : hauteur numérique en pixels
        if isinstance(v, (int, float)):
            return f"{int(v)}px"
        return v or "100px"


def render_spacer(a: SpacerAttributes, inner_html: Optional[str], class_name: str) -> str:
    return f'<div class="{css_classes("block", class_name)}"{style_attr({"height": a.height})} aria-hidden="true"></div>'
