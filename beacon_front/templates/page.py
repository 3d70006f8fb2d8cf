"""Template Page — pages WordPress standard (blocs, image, sous-pages)."""
from ..core.schemas import PageNode
from .base import RenderContext, breadcrumb, esc, featured_image, page_header


def _children_sidebar(node: PageNode) -> str:
    children = node.children.nodes if node.children else []
    if not children:
        return ""
    items = "".join(
        f'<li><a href="{esc(child.uri or "#")}" class="text-slate-600 hover:text-blue-600 text-sm block py-1">'
        f'{esc(child.title)}</a></li>'
        for child in children
    )
    return (
        '<aside class="lg:col-span-1 mt-12 lg:mt-0">'
        '<div class="bg-slate-50 rounded-xl p-6 sticky top-6">'
        '<h3 class="font-playfair text-lg font-bold text-slate-800 mb-4">In This Section</h3>'
        f'<ul class="space-y-2">{items}</ul>'
        '</div></aside>'
    )


def page_template(node: PageNode, ctx: RenderContext) -> str:
    parent = node.parent.node if node.parent else None
    trail = [(parent.title or "", parent.uri)] if parent else []
    header = page_header(
        breadcrumb(trail, node.title or "")
        + f'<h1 class="font-playfair text-3xl md:text-5xl font-bold">{esc(node.title)}</h1>'
    )

    sidebar = _children_sidebar(node)
    body = ctx.render_body(node) or '<p class="text-slate-500">No content available.</p>'
    grid_cls = ' class="lg:grid lg:grid-cols-4 lg:gap-12"' if sidebar else ""
    article_cls = ' class="lg:col-span-3"' if sidebar else ""

    return f"""<div class="min-h-screen bg-white">
{header}
{featured_image(node.featured_image, node.title)}
<div class="py-12 px-6"><div class="max-w-4xl mx-auto">
  <div{grid_cls}>
    <article{article_cls}>{body}</article>
    {sidebar}
  </div>
</div></div>
</div>"""
