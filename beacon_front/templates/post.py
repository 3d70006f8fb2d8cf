"""Template Post — article de blog."""
from ..core.schemas import PostNode
from .base import RenderContext, back_link, breadcrumb, esc, featured_image, format_date, page_header


def _categories(node: PostNode) -> str:
    cats = node.categories.nodes if node.categories else []
    if not cats:
        return ""
    pills = "".join(
        f'<span class="text-xs font-semibold bg-amber-500 text-slate-900 px-3 py-1 rounded-full">{esc(c.name)}</span>'
        for c in cats
    )
    return f'<div class="flex flex-wrap gap-2 mb-4">{pills}</div>'


def _meta(node: PostNode) -> str:
    parts = []
    author = node.author.node if node.author else None
    if author:
        avatar = ""
        if author.avatar and author.avatar.url:
            avatar = (f'<img src="{esc(author.avatar.url)}" alt="{esc(author.name)}" '
                      'width="40" height="40" class="rounded-full">')
        parts.append(f'<div class="flex items-center gap-2">{avatar}<span>{esc(author.name)}</span></div>')
    published = format_date(node.date)
    if published:
        parts.append(f'<time datetime="{esc(node.date)}">{published}</time>')
    return f'<div class="flex items-center gap-4 text-blue-100">{"".join(parts)}</div>'


def post_template(node: PostNode, ctx: RenderContext) -> str:
    header = page_header(
        breadcrumb([("Blog", "/blog")], node.title or "", "text-white truncate max-w-[200px]")
        + _categories(node)
        + f'<h1 class="font-playfair text-3xl md:text-5xl font-bold mb-6">{esc(node.title)}</h1>'
        + _meta(node)
    )
    return f"""<div class="min-h-screen bg-white">
{header}
{featured_image(node.featured_image, node.title)}
<article class="py-12 px-6"><div class="max-w-3xl mx-auto">{ctx.render_body(node)}</div></article>
{back_link("/blog", "Back to Blog")}
</div>"""
