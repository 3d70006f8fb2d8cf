"""Template Course — fiche formation FLMS (crédits, inscription, supports)."""
from ..core.schemas import CourseNode
from .base import RenderContext, back_link, breadcrumb, esc

_CARD = "bg-white rounded-xl shadow-lg p-6"
_CARD_TITLE = "font-playfair text-lg font-bold text-slate-800 mb-4"


def checkout_url(product_id: int) -> str:
    return f"/checkout/?add-to-cart={product_id}"


def _enroll_box(node: CourseNode) -> str:
    if node.woo_product_id:
        action = (f'<a href="{checkout_url(node.woo_product_id)}" class="block w-full bg-amber-500 hover:bg-amber-600 '
                  'text-slate-900 font-bold py-3 px-6 rounded-lg text-center transition-colors">Enroll Now</a>')
    else:
        action = '<p class="text-slate-500 text-sm">Contact us for enrollment options</p>'
    return (
        '<div class="bg-white text-slate-800 rounded-xl p-6 shadow-xl lg:w-80">'
        f'<h3 class="font-bold text-lg mb-4">Get This Course</h3>{action}</div>'
    )


def _header(node: CourseNode) -> str:
    badge = (f'<span class="inline-block bg-amber-500 text-slate-900 font-mono font-bold text-sm px-3 py-1 rounded mb-4">'
             f'#{esc(node.course_number)}</span>') if node.course_number else ""
    pills = ""
    if node.credits:
        pills = '<div class="flex flex-wrap gap-2">' + "".join(
            f'<span class="bg-blue-600 text-white text-sm font-semibold px-3 py-1 rounded-full">'
            f'{esc(c.credits)} {esc(c.name)}</span>'
            for c in node.credits
        ) + "</div>"
    return f"""<header class="bg-gradient-to-br from-slate-900 via-blue-900 to-slate-800 text-white py-12 px-6">
<div class="max-w-6xl mx-auto">
  {breadcrumb([("Courses", "/courses")], node.title or "", "text-white truncate max-w-[300px]")}
  <div class="flex flex-col lg:flex-row lg:items-start lg:justify-between gap-6">
    <div class="flex-1">
      {badge}
      <h1 class="font-playfair text-3xl md:text-4xl font-bold mb-4">{esc(node.title)}</h1>
      {pills}
    </div>
    {_enroll_box(node)}
  </div>
</div>
</header>"""


def _sidebar(node: CourseNode) -> str:
    cards = []
    if node.credits:
        rows = "".join(
            '<li class="flex justify-between items-center py-2 border-b border-slate-100 last:border-0">'
            f'<span class="text-slate-600">{esc(c.name)}</span>'
            f'<span class="font-bold text-slate-800">{esc(c.credits)}</span></li>'
            for c in node.credits
        )
        cards.append(f'<div class="{_CARD}"><h3 class="{_CARD_TITLE}">Credits Offered</h3>'
                     f'<ul class="space-y-3">{rows}</ul></div>')

    if node.materials:
        items = []
        for m in node.materials:
            if m.file:
                items.append(f'<li><a href="{esc(m.file)}" target="_blank" rel="noopener noreferrer" '
                             'class="flex items-center gap-2 text-blue-600 hover:text-blue-800">'
                             f'{esc(m.title or "Download")}</a></li>')
            else:
                items.append(f'<li><span class="text-slate-500">{esc(m.title)}</span></li>')
        cards.append(f'<div class="{_CARD}"><h3 class="{_CARD_TITLE}">Course Materials</h3>'
                     f'<ul class="space-y-2">{"".join(items)}</ul></div>')

    notes = node.master_course_list_fields.notes if node.master_course_list_fields else None
    if notes:
        cards.append('<div class="bg-amber-50 border border-amber-200 rounded-xl p-6">'
                     '<h3 class="font-bold text-amber-800 mb-2">Note</h3>'
                     f'<p class="text-amber-700 text-sm">{esc(notes)}</p></div>')

    return f'<aside class="lg:col-span-1 mt-8 lg:mt-0 space-y-6">{"".join(cards)}</aside>'


def course_template(node: CourseNode, ctx: RenderContext) -> str:
    if node.course_description:
        description = (f'<div class="prose prose-slate max-w-none prose-headings:font-playfair prose-a:text-blue-600">'
                       f'{node.course_description}</div>')
    else:
        description = '<p class="text-slate-500">No description available for this course.</p>'

    preview = ""
    if node.course_preview:
        preview = (f'<div class="mt-8 {_CARD}">'
                   '<h2 class="font-playfair text-2xl font-bold text-slate-800 mb-4">Course Preview</h2>'
                   f'<div class="prose prose-slate max-w-none">{node.course_preview}</div></div>')

    return f"""<div class="min-h-screen bg-slate-50">
{_header(node)}
<div class="py-12 px-6"><div class="max-w-6xl mx-auto">
  <div class="lg:grid lg:grid-cols-3 lg:gap-12">
    <div class="lg:col-span-2">
      <div class="bg-white rounded-xl shadow-lg overflow-hidden">
        <div class="border-b border-slate-200 px-6 py-4 text-sm font-semibold text-blue-600">Course Details</div>
        <div class="p-6">{description}</div>
      </div>
      {preview}
    </div>
    {_sidebar(node)}
  </div>
</div></div>
{back_link("/courses", "Back to Courses", "max-w-6xl")}
</div>"""
