"""
Content renderer — HTML brut WordPress enveloppé dans un conteneur typographique.

Frontière de confiance : le HTML n'est PAS assaini ici. Le backend WordPress
(kses à l'enregistrement) fait autorité ; ce module insère le markup tel quel.
"""
from typing import Optional

SIZE_CLASSES = {
    "sm":   "prose-sm",
    "base": "prose",
    "lg":   "prose-lg",
    "xl":   "prose-xl",
}

MAX_WIDTH_CLASSES = {
    "prose": "max-w-prose",
    "none":  "max-w-none",
    "full":  "max-w-full",
}

ALLOWED_TAGS = ("article", "div", "section")

# Typographie des éléments WordPress (Tailwind Typography + classes wp-block-*)
PROSE_CLASSES = " ".join("""
    prose-slate
    prose-headings:font-playfair prose-headings:text-slate-800 prose-headings:scroll-mt-20
    prose-h1:text-4xl prose-h1:font-bold prose-h1:mb-6
    prose-h2:text-3xl prose-h2:font-bold prose-h2:mt-12 prose-h2:mb-4
    prose-h3:text-2xl prose-h3:font-semibold prose-h3:mt-8 prose-h3:mb-3
    prose-h4:text-xl prose-h4:font-semibold prose-h4:mt-6 prose-h4:mb-2
    prose-p:text-slate-700 prose-p:leading-relaxed prose-p:mb-4
    prose-a:text-blue-600 prose-a:no-underline prose-a:font-medium
    hover:prose-a:underline hover:prose-a:text-blue-800
    prose-strong:text-slate-900 prose-strong:font-semibold
    prose-ul:my-6 prose-ul:list-disc prose-ul:pl-6
    prose-ol:my-6 prose-ol:list-decimal prose-ol:pl-6
    prose-li:my-2 prose-li:text-slate-700
    prose-blockquote:border-l-4 prose-blockquote:border-amber-500 prose-blockquote:bg-slate-50
    prose-blockquote:pl-6 prose-blockquote:py-4 prose-blockquote:my-6 prose-blockquote:text-slate-600
    prose-code:bg-slate-100 prose-code:px-1.5 prose-code:py-0.5 prose-code:rounded prose-code:text-sm
    prose-code:font-mono prose-code:text-slate-800
    prose-pre:bg-slate-900 prose-pre:text-slate-100 prose-pre:rounded-lg prose-pre:p-4 prose-pre:my-6
    prose-img:rounded-lg prose-img:shadow-lg prose-img:my-6
    prose-figure:my-8 prose-figcaption:text-center prose-figcaption:text-slate-500 prose-figcaption:text-sm
    prose-table:w-full prose-table:my-6
    prose-th:bg-slate-100 prose-th:px-4 prose-th:py-2 prose-th:text-left prose-th:font-semibold
    prose-td:px-4 prose-td:py-2 prose-td:border-b prose-td:border-slate-200
    prose-hr:border-slate-300 prose-hr:my-8
    [&_.wp-block-embed]:my-8 [&_.wp-block-embed__wrapper]:aspect-video
    [&_.wp-block-gallery]:grid [&_.wp-block-gallery]:gap-4 [&_.wp-block-gallery]:my-8
    [&_.wp-block-columns]:flex [&_.wp-block-columns]:flex-wrap [&_.wp-block-columns]:gap-6
    [&_.wp-block-column]:flex-1 [&_.wp-block-column]:min-w-[250px]
    [&_.wp-block-buttons]:flex [&_.wp-block-buttons]:flex-wrap [&_.wp-block-buttons]:gap-4
    [&_.wp-block-button__link]:inline-block [&_.wp-block-button__link]:px-6
    [&_.wp-block-button__link]:py-3 [&_.wp-block-button__link]:rounded-lg
    [&_.wp-block-separator]:border-0 [&_.wp-block-separator]:h-px [&_.wp-block-separator]:bg-slate-300
    [&_.wp-block-spacer]:block
""".split())


def render_content(
    content: Optional[str],
    size: str = "lg",
    max_width: str = "none",
    tag: str = "div",
    class_name: str = "",
) -> str:
    """
    Enveloppe `content` (HTML brut) dans `<tag class="prose…">`.

    Valeurs d'options inconnues → valeurs par défaut (lg / none / div).
    Contenu vide ou None → "".
    """
    if not content:
        return ""
    size_cls  = SIZE_CLASSES.get(size, SIZE_CLASSES["lg"])
    width_cls = MAX_WIDTH_CLASSES.get(max_width, MAX_WIDTH_CLASSES["none"])
    tag = tag if tag in ALLOWED_TAGS else "div"
    cls = " ".join(c for c in (size_cls, width_cls, PROSE_CLASSES, class_name) if c)
    return f'<{tag} class="{cls}">{content}</{tag}>'


def render_prose(children_html: str, size: str = "lg", class_name: str = "") -> str:
    """Wrapper léger pour du HTML déjà rendu (cartes, extraits)."""
    size_cls = SIZE_CLASSES.get(size, SIZE_CLASSES["lg"])
    cls = " ".join(c for c in (
        size_cls, "prose-slate prose-headings:font-playfair prose-a:text-blue-600 max-w-none", class_name,
    ) if c)
    return f'<div class="{cls}">{children_html}</div>'
