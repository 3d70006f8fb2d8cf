"""Template Contact — contenu de la page + coordonnées ACF (adresse, téléphone, email, horaires, carte)."""
import re

from ..core.schemas import PageNode
from .base import RenderContext, esc

_NON_DIGITS = re.compile(r"\D")


def tel_href(phone: str) -> str:
    return "tel:" + _NON_DIGITS.sub("", phone)


def _detail(label: str, value_html: str) -> str:
    return (
        '<div class="flex gap-4"><div>'
        f'<h3 class="font-semibold text-slate-800">{label}</h3>{value_html}'
        '</div></div>'
    )


def contact_template(node: PageNode, ctx: RenderContext) -> str:
    fields = node.acf_contact_fields
    details = []
    if fields and fields.address:
        details.append(_detail("Address", f'<p class="text-slate-600">{fields.address}</p>'))
    if fields and fields.phone:
        details.append(_detail("Phone", f'<a href="{tel_href(fields.phone)}" class="text-blue-600 hover:text-blue-800">'
                                        f'{esc(fields.phone)}</a>'))
    if fields and fields.email:
        details.append(_detail("Email", f'<a href="mailto:{esc(fields.email)}" class="text-blue-600 hover:text-blue-800">'
                                        f'{esc(fields.email)}</a>'))
    if fields and fields.hours:
        details.append(_detail("Hours", f'<p class="text-slate-600">{fields.hours}</p>'))

    content = f'<div class="prose prose-slate max-w-none mb-8">{node.content}</div>' if node.content else ""
    # iframe fournie par l'éditeur WordPress
    map_embed = (f'<div class="mt-8 rounded-xl overflow-hidden shadow-lg"><div class="aspect-video">{fields.map_embed}</div></div>'
                 if fields and fields.map_embed else "")

    return f"""<div class="min-h-screen bg-slate-50">
<header class="bg-gradient-to-br from-slate-900 via-blue-900 to-slate-800 text-white py-16 px-6">
  <div class="max-w-4xl mx-auto text-center">
    <nav class="mb-6"><ol class="flex items-center justify-center gap-2 text-sm text-blue-200">
      <li><a href="/" class="hover:text-white">Home</a></li><li>/</li>
      <li class="text-white">{esc(node.title or "Contact")}</li>
    </ol></nav>
    <h1 class="font-playfair text-4xl md:text-5xl font-bold">{esc(node.title or "Contact Us")}</h1>
  </div>
</header>
<section class="py-12 px-6"><div class="max-w-6xl mx-auto">
  {content}
  <div class="bg-white rounded-xl shadow-lg p-6 space-y-6">
    <h2 class="font-playfair text-2xl font-bold text-slate-800">Get in Touch</h2>
    {"".join(details)}
  </div>
  {map_embed}
</div></section>
</div>"""
