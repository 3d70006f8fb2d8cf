"""Blocs média — image, gallery, embed (YouTube / Vimeo / Twitter / générique)."""
import re
from html import escape
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import (
    MEDIA_ALIGN_CLASSES, BlockAttributes, css_classes, figcaption, html_attr, style_attr,
)

_YOUTUBE_RE = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([a-zA-Z0-9_-]{11})")
_VIMEO_RE   = re.compile(r"vimeo\.com/(?:video/)?(\d+)")

GALLERY_COLUMN_CLASSES = {
    1: "grid-cols-1",
    2: "grid-cols-1 md:grid-cols-2",
    3: "grid-cols-1 md:grid-cols-2 lg:grid-cols-3",
    4: "grid-cols-2 md:grid-cols-3 lg:grid-cols-4",
    5: "grid-cols-2 md:grid-cols-3 lg:grid-cols-5",
    6: "grid-cols-2 md:grid-cols-3 lg:grid-cols-6",
}

MediaAlign = Literal["left", "center", "right", "wide", "full"]


# ── core/image ──────────────────────────────────────────────────────────────

class ImageAttributes(BlockAttributes):
    url: Optional[str] = None
    alt: str = ""
    caption: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    align: Optional[MediaAlign] = None
    href: Optional[str] = None
    link_target: Optional[str] = Field(default=None, alias="linkTarget")
    title: Optional[str] = None

    @field_validator("alt", mode="before")
    @classmethod
    def _alt(cls, v):
        return v or ""

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, v):
        # Gutenberg récent : "300px"
        if isinstance(v, str):
            digits = re.match(r"\d+", v.strip())
            return int(digits.group()) if digits else None
        return v


def render_image(a: ImageAttributes, inner_html: Optional[str], class_name: str) -> str:
    if not a.url:
        return ""
    radius = a.style.border.radius
    img = (
        f'<img src="{escape(a.url)}" alt="{escape(a.alt)}"'
        f' width="{a.width or 800}" height="{a.height or 600}"'
        f'{html_attr("title", a.title)} loading="lazy"'
        f' class="{css_classes("shadow-lg", "" if radius else "rounded-lg")}"'
        f'{style_attr({"border-radius": radius})}>'
    )
    if a.href:
        rel = ' rel="noopener noreferrer"' if a.link_target == "_blank" else ""
        img = f'<a href="{escape(a.href)}"{html_attr("target", a.link_target)}{rel} class="block">{img}</a>'

    align_cls = MEDIA_ALIGN_CLASSES.get(a.align or "center", MEDIA_ALIGN_CLASSES["center"])
    return f'<figure class="{css_classes("my-8", align_cls, class_name)}">{img}{figcaption(a.caption)}</figure>'


# ── core/gallery ────────────────────────────────────────────────────────────

class GalleryImage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    url: Optional[str] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    id: Optional[int] = None
    link: Optional[str] = None


class GalleryAttributes(BlockAttributes):
    images: List[GalleryImage] = Field(default_factory=list)
    columns: int = 3
    caption: Optional[str] = None
    image_crop: bool = Field(default=True, alias="imageCrop")
    link_to: Literal["none", "media", "attachment"] = Field(default="none", alias="linkTo")

    @field_validator("images", mode="before")
    @classmethod
    def _images(cls, v):
        return v or []

    @field_validator("columns", mode="before")
    @classmethod
    def _columns(cls, v):
        return v if v is not None else 3


def _gallery_item(image: GalleryImage, crop: bool, link_to: str) -> str:
    caption = (
        f'<div class="absolute bottom-0 left-0 right-0 bg-black/50 text-white text-sm p-2">{escape(image.caption)}</div>'
        if image.caption else ""
    )
    img_cls = css_classes("object-cover w-full h-full" if crop else "", "hover:scale-105 transition-transform duration-300")
    item = (
        f'<div class="{css_classes("relative overflow-hidden rounded-lg", "aspect-square" if crop else "")}">'
        f'<img src="{escape(image.url)}" alt="{escape(image.alt or "")}" loading="lazy" class="{img_cls}">'
        f'{caption}</div>'
    )
    if link_to == "media":
        return f'<a href="{escape(image.url)}" target="_blank" rel="noopener noreferrer" class="block">{item}</a>'
    if link_to == "attachment" and image.link:
        return f'<a href="{escape(image.link)}" class="block">{item}</a>'
    return item


def render_gallery(a: GalleryAttributes, inner_html: Optional[str], class_name: str) -> str:
    col_cls = GALLERY_COLUMN_CLASSES.get(a.columns, GALLERY_COLUMN_CLASSES[3])

    if inner_html is not None:
        # format moderne : un bloc core/image par enfant
        items = inner_html
    else:
        images = [img for img in a.images if img.url]
        if not images:
            return ""
        items = "".join(_gallery_item(img, a.image_crop, a.link_to) for img in images)

    return (
        f'<figure class="{css_classes("my-8", class_name)}">'
        f'<div class="grid gap-4 {col_cls}">{items}</div>'
        f'{figcaption(a.caption, "text-center text-slate-500 text-sm mt-4")}'
        f'</figure>'
    )


# ── core/embed ──────────────────────────────────────────────────────────────

class EmbedAttributes(BlockAttributes):
    url: Optional[str] = None
    caption: Optional[str] = None
    type: Optional[str] = None
    provider_name_slug: Optional[str] = Field(default=None, alias="providerNameSlug")
    responsive: bool = True
    align: Optional[MediaAlign] = None


def embed_url(url: str) -> Optional[str]:
    """URL publique YouTube / Vimeo → URL du player embarquable (None si non reconnue)."""
    if not url:
        return None
    m = _YOUTUBE_RE.search(url)
    if m:
        return f"https://www.youtube.com/embed/{m.group(1)}"
    m = _VIMEO_RE.search(url)
    if m:
        return f"https://player.vimeo.com/video/{m.group(1)}"
    if "/embed/" in url or "player.vimeo.com" in url:
        return url
    return None


def is_video_embed(url: str, provider: Optional[str] = None) -> bool:
    if not url:
        return False
    return (
        "youtube" in url or "youtu.be" in url or "vimeo" in url
        or provider in ("youtube", "vimeo")
    )


def _is_twitter(url: str, provider: Optional[str]) -> bool:
    return provider == "twitter" or "twitter.com" in url or "x.com" in url


def render_embed(a: EmbedAttributes, inner_html: Optional[str], class_name: str) -> str:
    if not a.url:
        return ""
    align_cls = MEDIA_ALIGN_CLASSES.get(a.align or "center", MEDIA_ALIGN_CLASSES["center"])
    caption = figcaption(a.caption)
    player = embed_url(a.url)

    if player and is_video_embed(a.url, a.provider_name_slug):
        frame_cls = "absolute inset-0 w-full h-full" if a.responsive else "w-full"
        wrap_cls = css_classes("relative overflow-hidden rounded-lg shadow-lg", "aspect-video" if a.responsive else "")
        return (
            f'<figure class="{css_classes("my-8", align_cls, class_name)}">'
            f'<div class="{wrap_cls}">'
            f'<iframe src="{escape(player)}" title="{escape(a.caption or "Embedded video")}"'
            f' allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"'
            f' allowfullscreen class="{frame_cls}"></iframe>'
            f'</div>{caption}</figure>'
        )

    if _is_twitter(a.url, a.provider_name_slug):
        return (
            f'<figure class="{css_classes("my-8", align_cls, "max-w-lg", class_name)}">'
            f'<div class="bg-slate-100 rounded-lg p-4">'
            f'<a href="{escape(a.url)}" target="_blank" rel="noopener noreferrer"'
            f' class="text-blue-600 hover:underline break-all">View on Twitter/X &rarr;</a>'
            f'</div>{caption}</figure>'
        )

    return (
        f'<figure class="{css_classes("my-8", align_cls, class_name)}">'
        f'<div class="bg-slate-100 rounded-lg p-6 text-center">'
        f'<p class="text-slate-600 mb-2">Embedded content</p>'
        f'<a href="{escape(a.url)}" target="_blank" rel="noopener noreferrer"'
        f' class="text-blue-600 hover:underline break-all text-sm">{escape(a.url)}</a>'
        f'</div>{caption}</figure>'
    )
