"""
Template Landing — pages composées de rangées ACF Flexible Content.

Chaque rangée est dispatchée sur son `__typename` ; type inconnu → avertissement,
rien n'est rendu. Sans rangées → en-tête titre + contenu de la page.
"""
import logging
from typing import Callable, Dict

from ..core.schemas import FlexibleLayout, PageNode
from .base import RenderContext, esc

log = logging.getLogger(__name__)

LAYOUT_PREFIX = "FlexibleContentFlexibleContent"


def _section(layout: FlexibleLayout, cls: str, inner: str, style: str = "") -> str:
    band_id = f' id="{esc(layout.band_id)}"' if layout.band_id else ""
    classes = f"{cls} {layout.band_classes}".strip() if layout.band_classes else cls
    return f'<section{band_id} class="{esc(classes)}"{style}>{inner}</section>'


def _buttons(layout: FlexibleLayout, first_cls: str, other_cls: str, default_label: str) -> str:
    links = []
    for btn in layout.buttons:
        link = btn.button
        if not link or not link.url:
            continue
        cls = first_cls if not links else other_cls
        target = f' target="{esc(link.target)}"' if link.target else ""
        links.append(f'<a href="{esc(link.url)}"{target} class="font-bold py-3 px-8 rounded-lg transition-colors {cls}">'
                     f'{esc(link.title or default_label)}</a>')
    if not links:
        return ""
    return f'<div class="flex flex-wrap gap-4 justify-center">{"".join(links)}</div>'


# ── Rangées ─────────────────────────────────────────────────────────────────

def render_hero(layout: FlexibleLayout) -> str:
    bg = layout.background_image.node if layout.background_image else None
    style = ""
    if bg and bg.source_url:
        style = f' style="background-image:url({esc(bg.source_url)});background-size:cover;background-position:center;"'
    parts = ['<div class="absolute inset-0 bg-gradient-to-br from-slate-900/80 via-blue-900/70 to-slate-800/80"></div>',
             '<div class="relative z-10 max-w-4xl mx-auto text-center">']
    if layout.heading:
        parts.append(f'<h1 class="font-playfair text-4xl md:text-6xl font-bold mb-6">{esc(layout.heading)}</h1>')
    if layout.subheading:
        parts.append(f'<p class="text-xl md:text-2xl text-blue-100 mb-8 max-w-2xl mx-auto">{esc(layout.subheading)}</p>')
    if layout.content:
        parts.append(f'<div class="prose prose-lg prose-invert mx-auto mb-8">{layout.content}</div>')
    parts.append(_buttons(layout,
                          "bg-amber-500 hover:bg-amber-400 text-slate-900",
                          "border-2 border-white hover:bg-white hover:text-slate-900",
                          "Learn More"))
    parts.append("</div>")
    return _section(layout, "relative min-h-[60vh] flex items-center justify-center text-white py-20 px-6",
                    "".join(parts), style)


def render_heading(layout: FlexibleLayout) -> str:
    align = layout.text_alignment or "center"
    heading = (f'<h2 class="font-playfair text-3xl md:text-4xl font-bold text-slate-800">{esc(layout.heading)}</h2>'
               if layout.heading else "")
    return _section(layout, "py-16 px-6",
                    f'<div class="max-w-4xl mx-auto" style="text-align:{esc(align)};">{heading}</div>')


def render_cta_buttons(layout: FlexibleLayout) -> str:
    content = (f'<div class="prose prose-lg max-w-none mb-8 text-slate-800">{layout.content}</div>'
               if layout.content else "")
    buttons = _buttons(layout,
                       "bg-slate-900 hover:bg-slate-800 text-white",
                       "bg-slate-900 hover:bg-slate-800 text-white",
                       "Click Here")
    return _section(layout, "py-16 px-6 bg-amber-500",
                    f'<div class="max-w-4xl mx-auto text-center">{content}{buttons}</div>')


def render_image_module(layout: FlexibleLayout) -> str:
    image = layout.image.node if layout.image else None
    if image is None or not image.source_url:
        return ""
    caption = (f'<figcaption class="mt-4 text-center text-slate-600 text-sm">{esc(layout.caption)}</figcaption>'
               if layout.caption else "")
    img = f'<img src="{esc(image.source_url)}" alt="{esc(image.alt_text or "")}" class="absolute inset-0 w-full h-full object-cover">'
    if layout.link and layout.link.url:
        target = f' target="{esc(layout.link.target)}"' if layout.link.target else ""
        img = f'<a href="{esc(layout.link.url)}"{target}>{img}</a>'
    return _section(layout, "py-12 px-6",
                    '<div class="max-w-4xl mx-auto"><figure>'
                    f'<div class="relative aspect-video rounded-xl overflow-hidden shadow-lg">{img}</div>'
                    f'{caption}</figure></div>')


def render_wysiwyg(layout: FlexibleLayout) -> str:
    if not layout.content:
        return ""
    return _section(layout, "py-12 px-6",
                    '<div class="max-w-3xl mx-auto">'
                    '<div class="prose prose-lg prose-slate max-w-none prose-headings:font-playfair prose-a:text-blue-600">'
                    f'{layout.content}</div></div>')


def render_accordion(layout: FlexibleLayout) -> str:
    if not layout.accordion_items:
        return ""
    items = []
    for item in layout.accordion_items:
        is_open = " open" if item.default_state == "open" else ""
        body = f'<div class="px-6 pb-4 prose prose-slate max-w-none">{item.content}</div>' if item.content else ""
        items.append(
            f'<details class="bg-white rounded-xl shadow-lg overflow-hidden"{is_open}>'
            '<summary class="px-6 py-4 cursor-pointer font-semibold text-slate-800 hover:bg-slate-50">'
            f'{esc(item.heading)}</summary>{body}</details>'
        )
    return _section(layout, "py-12 px-6",
                    f'<div class="max-w-3xl mx-auto"><div class="space-y-4">{"".join(items)}</div></div>')


LAYOUT_RENDERERS: Dict[str, Callable[[FlexibleLayout], str]] = {
    f"{LAYOUT_PREFIX}HeroLayout":        render_hero,
    f"{LAYOUT_PREFIX}HeadingLayout":     render_heading,
    f"{LAYOUT_PREFIX}CtaButtonsLayout":  render_cta_buttons,
    f"{LAYOUT_PREFIX}ImageModuleLayout": render_image_module,
    f"{LAYOUT_PREFIX}WysiwygLayout":     render_wysiwyg,
    f"{LAYOUT_PREFIX}AccordionLayout":   render_accordion,
}


def render_layout(layout: FlexibleLayout) -> str:
    renderer = LAYOUT_RENDERERS.get(layout.typename)
    if renderer is None:
        log.warning("Type de rangée inconnu : %s", layout.typename or "<vide>")
        return ""
    return renderer(layout)


def landing_template(node: PageNode, ctx: RenderContext) -> str:
    layouts = node.acf_page_fields.flexible_content if node.acf_page_fields else []
    if layouts:
        return f'<div class="min-h-screen">{"".join(render_layout(layout) for layout in layouts)}</div>'

    body = ""
    if node.content:
        body = ('<article class="py-12 px-6"><div class="max-w-3xl mx-auto">'
                f'<div class="prose prose-lg prose-slate max-w-none">{node.content}</div></div></article>')
    return f"""<div class="min-h-screen">
<header class="bg-gradient-to-br from-slate-900 via-blue-900 to-slate-800 text-white py-20 px-6">
  <div class="max-w-4xl mx-auto text-center">
    <h1 class="font-playfair text-4xl md:text-5xl font-bold mb-6">{esc(node.title)}</h1>
  </div>
</header>
{body}
</div>"""
