"""Template par défaut — types de contenu sans template dédié."""
from .base import breadcrumb, esc, page_header


def default_template(node, ctx) -> str:
    title = getattr(node, "title", None)
    typename = getattr(node, "typename", None)
    content = getattr(node, "content", None)

    type_line = f'<p class="mt-4 text-blue-200 text-sm">Content Type: {esc(typename)}</p>' if typename else ""
    header = page_header(
        breadcrumb([], title or "Page")
        + f'<h1 class="font-playfair text-3xl md:text-5xl font-bold">{esc(title or "Untitled")}</h1>'
        + type_line
    )

    if content:
        body = f'<div class="prose prose-lg prose-slate max-w-none">{content}</div>'
    else:
        body = '<p class="text-slate-500 text-center py-8">No content available for this page.</p>'

    return f"""<div class="min-h-screen bg-white">
{header}
<article class="py-12 px-6"><div class="max-w-3xl mx-auto">{body}</div></article>
</div>"""
