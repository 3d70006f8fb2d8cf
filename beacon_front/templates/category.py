"""Template Category — archives de catégories et d'étiquettes (Tag)."""
from ..core.schemas import CategoryNode, ContentType
from .base import RenderContext, back_link, breadcrumb, esc, page_header


def category_template(node: CategoryNode, ctx: RenderContext) -> str:
    kind = "Tag" if node.typename == ContentType.TAG else "Category"
    badge_cls = "bg-emerald-500 text-emerald-900" if kind == "Tag" else "bg-amber-500 text-amber-900"

    count = ""
    if node.count is not None:
        count = f'<span class="text-blue-200 text-sm">{node.count} {"post" if node.count == 1 else "posts"}</span>'
    description = f'<p class="mt-4 text-xl text-blue-100 max-w-2xl">{esc(node.description)}</p>' if node.description else ""

    header = page_header(
        breadcrumb([("Blog", "/blog")], f"{kind}: {node.name or ''}")
        + '<div class="flex items-center gap-3 mb-4">'
        + f'<span class="text-xs font-semibold px-3 py-1 rounded-full {badge_cls}">{kind}</span>{count}</div>'
        + f'<h1 class="font-playfair text-3xl md:text-5xl font-bold">{esc(node.name)}</h1>'
        + description,
        width="max-w-6xl",
    )
    return f"""<div class="min-h-screen bg-slate-50">
{header}
<section class="py-12 px-6"><div class="max-w-6xl mx-auto">
  <div class="bg-white rounded-xl shadow-lg p-8 text-center">
    <p class="text-slate-500">Posts in this {kind.lower()} will be displayed here.</p>
  </div>
</div></section>
{back_link("/blog", "Back to Blog", "max-w-6xl")}
</div>"""
