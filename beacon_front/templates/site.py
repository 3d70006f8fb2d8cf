"""
Pages construites côté front (pas de nœud WordPress unique derrière) :
accueil, index du blog, catalogue de formations, pages d'erreur.
"""
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from ..core.course_filters import (
    DEFAULT_SORT, DESIGNATIONS, MAX_CREDITS, MIN_CREDITS, SORT_OPTIONS, CourseFilterState,
)
from ..core.schemas import CourseNode, PostNode
from .base import esc, excerpt, format_date, page_header

CARD_EXCERPT_LENGTH = 150

_CARD = "bg-white rounded-xl shadow-lg overflow-hidden hover:shadow-xl transition-shadow"
_GRID = "grid md:grid-cols-2 lg:grid-cols-3 gap-8"
_EMPTY = '<div class="text-center py-12 bg-white rounded-xl shadow"><p class="text-slate-500">{}</p></div>'


def course_href(course: CourseNode) -> str:
    return course.uri or f"/course/{course.slug or course.database_id}/"


def _credit_pills(course: CourseNode, limit: Optional[int] = None) -> str:
    credits = course.credits[:limit] if limit else course.credits
    if not credits:
        return ""
    return '<div class="flex flex-wrap gap-2 mb-4">' + "".join(
        f'<span class="bg-blue-100 text-blue-800 text-xs font-semibold px-2 py-1 rounded">'
        f'{esc(c.credits)} {esc(c.name)}</span>'
        for c in credits
    ) + "</div>"


def course_card(course: CourseNode) -> str:
    number = (f'<span class="inline-block bg-amber-100 text-amber-800 font-mono text-sm font-bold px-2 py-1 rounded mb-3">'
              f'#{esc(course.course_number)}</span>') if course.course_number else ""
    summary = excerpt(course.course_description, CARD_EXCERPT_LENGTH)
    description = f'<p class="text-slate-600 text-sm line-clamp-3 mb-4">{esc(summary)}...</p>' if summary else ""
    href = esc(course_href(course))
    return f"""<article class="{_CARD}"><div class="p-6">
  {number}
  <h2 class="font-playfair text-xl font-bold text-slate-800 mb-3"><a href="{href}" class="hover:text-blue-700 transition-colors">{esc(course.title)}</a></h2>
  {_credit_pills(course, 4)}
  {description}
  <a href="{href}" class="inline-flex items-center gap-2 text-sm font-semibold text-amber-600 hover:text-amber-700">View Course &rarr;</a>
</div></article>"""


def post_card(post: PostNode) -> str:
    href = esc(post.uri or f"/blog/{post.slug}")
    media = post.featured_image.node if post.featured_image else None
    image = ""
    if media and media.source_url:
        image = (f'<div class="relative h-48 overflow-hidden"><img src="{esc(media.source_url)}" '
                 f'alt="{esc(media.alt_text or post.title or "")}" class="w-full h-full object-cover"></div>')
    cats = post.categories.nodes if post.categories else []
    pills = ""
    if cats:
        pills = '<div class="flex flex-wrap gap-2 mb-3">' + "".join(
            f'<span class="text-xs font-semibold text-blue-600 bg-blue-50 px-2 py-1 rounded">{esc(c.name)}</span>'
            for c in cats[:2]
        ) + "</div>"
    # l'extrait WordPress est du HTML
    summary = f'<div class="text-slate-600 text-sm line-clamp-3 mb-4">{post.excerpt}</div>' if post.excerpt else ""
    return f"""<article class="{_CARD}">{image}<div class="p-6">
  {pills}
  <h2 class="font-playfair text-xl font-bold mb-3 text-slate-800"><a href="{href}" class="hover:text-blue-700 transition-colors">{esc(post.title)}</a></h2>
  {summary}
  <div class="flex items-center justify-between">
    <time class="text-xs text-slate-500">{format_date(post.date)}</time>
    <a href="{href}" class="text-sm font-semibold text-amber-600 hover:text-amber-700">Read More &rarr;</a>
  </div>
</div></article>"""


# ── Accueil ─────────────────────────────────────────────────────────────────

def render_home(courses: List[CourseNode], settings: Optional[Dict[str, Any]] = None,
                error: Optional[str] = None) -> str:
    settings = settings or {}
    title = settings.get("title") or "Beacon Hill Financial Educators"
    tagline = settings.get("description") or "Professional continuing education for financial professionals"
    if courses:
        featured = f'<div class="{_GRID}">{"".join(course_card(c) for c in courses)}</div>'
    else:
        featured = _EMPTY.format("Unable to connect to WordPress." if error else "No courses found.")

    return f"""<section class="bg-gradient-to-br from-slate-900 via-blue-900 to-slate-800 text-white py-24 px-6">
<div class="max-w-6xl mx-auto text-center">
  <h1 class="font-playfair text-5xl md:text-6xl font-bold mb-6">{esc(title)}</h1>
  <p class="text-xl md:text-2xl text-blue-100 max-w-3xl mx-auto mb-10">{esc(tagline)}</p>
  <div class="flex gap-4 justify-center flex-wrap">
    <a href="/courses/" class="bg-amber-500 hover:bg-amber-400 text-slate-900 font-bold py-4 px-8 rounded-lg transition-colors">Browse Courses</a>
    <a href="/about/" class="border-2 border-white hover:bg-white hover:text-slate-900 font-bold py-4 px-8 rounded-lg transition-colors">Learn More</a>
  </div>
</div>
</section>
<section class="py-20 px-6 bg-slate-50">
<div class="max-w-6xl mx-auto">
  <h2 class="font-playfair text-4xl font-bold text-center mb-4 text-slate-800">Featured Courses</h2>
  <p class="text-center text-slate-600 mb-12 max-w-2xl mx-auto">Earn CPE and CFP credits with our comprehensive continuing education courses</p>
  {featured}
  <div class="text-center mt-12">
    <a href="/courses/" class="inline-block border-2 border-slate-800 hover:bg-slate-800 hover:text-white text-slate-800 font-bold py-3 px-8 rounded-lg transition-colors">View All Courses &rarr;</a>
  </div>
</div>
</section>
<section class="py-20 px-6 bg-amber-500">
<div class="max-w-4xl mx-auto text-center">
  <h2 class="font-playfair text-4xl font-bold mb-6 text-slate-900">Ready to advance your career?</h2>
  <p class="text-xl text-slate-800 mb-8">Join thousands of financial professionals who trust BHFE for their continuing education needs.</p>
  <a href="/courses/" class="inline-block bg-slate-900 hover:bg-slate-800 text-white font-bold py-4 px-10 rounded-lg transition-colors text-lg">Get Started Today</a>
</div>
</section>"""


# ── Blog ────────────────────────────────────────────────────────────────────

def render_blog_index(posts: List[PostNode]) -> str:
    header = page_header(
        '<h1 class="font-playfair text-4xl md:text-5xl font-bold mb-4">Blog</h1>'
        '<p class="text-xl text-blue-100 max-w-2xl">News, insights and updates for financial professionals.</p>',
        width="max-w-6xl",
    )
    body = f'<div class="{_GRID}">{"".join(post_card(p) for p in posts)}</div>' if posts else _EMPTY.format("No posts found.")
    return f'{header}<section class="py-12 px-6 bg-slate-50"><div class="max-w-6xl mx-auto">{body}</div></section>'


# ── Catalogue ───────────────────────────────────────────────────────────────

def filter_query(state: CourseFilterState, **changes: Any) -> str:
    """Query string de l'état (valeurs par défaut omises), avec modifications éventuelles."""
    data = state.model_copy(update=changes)
    params = {}
    if data.search:
        params["q"] = data.search
    if data.designations:
        params["d"] = ",".join(data.designations)
    if data.min_credits > MIN_CREDITS:
        params["min"] = data.min_credits
    if data.max_credits < MAX_CREDITS:
        params["max"] = data.max_credits
    if data.sort != DEFAULT_SORT:
        params["sort"] = data.sort
    return f"?{urlencode(params)}" if params else ""


def _filter_form(state: CourseFilterState) -> str:
    tabs = []
    for key, (label, _) in DESIGNATIONS.items():
        active = key in state.designations
        toggled = [d for d in state.designations if d != key] if active else state.designations + [key]
        cls = "bg-amber-500 text-white shadow-md" if active else "bg-slate-100 text-slate-700 hover:bg-slate-200"
        tabs.append(f'<a href="/courses{esc(filter_query(state, designations=toggled))}" '
                    f'class="px-4 py-2 rounded-lg font-medium text-sm transition-all {cls}">{esc(label)}</a>')
    options = "".join(
        f'<option value="{key}"{" selected" if key == state.sort else ""}>{esc(label)}</option>'
        for key, label in SORT_OPTIONS.items()
    )
    designations = f'<input type="hidden" name="d" value="{esc(",".join(state.designations))}">' if state.designations else ""
    clear = '<a href="/courses" class="text-sm text-amber-600 hover:text-amber-700 font-medium">Clear all filters</a>' if state.is_active else ""
    return f"""<div class="bg-white rounded-xl shadow-lg p-6 space-y-6">
<form method="get" action="/courses" class="space-y-4">
  <input type="text" name="q" value="{esc(state.search)}" placeholder="Search by course title, number, or keyword..." class="w-full px-4 py-3 text-lg border-2 border-slate-200 rounded-xl focus:border-amber-500 outline-none">
  {designations}
  <div class="flex flex-wrap items-end gap-4">
    <label class="text-sm font-semibold text-slate-700">Min credits <input type="number" name="min" min="{MIN_CREDITS}" max="{MAX_CREDITS}" value="{state.min_credits}" class="block w-24 border-2 border-slate-200 rounded-lg px-2 py-1"></label>
    <label class="text-sm font-semibold text-slate-700">Max credits <input type="number" name="max" min="{MIN_CREDITS}" max="{MAX_CREDITS}" value="{state.max_credits}" class="block w-24 border-2 border-slate-200 rounded-lg px-2 py-1"></label>
    <label class="text-sm font-semibold text-slate-700">Sort by <select name="sort" class="block border-2 border-slate-200 rounded-lg px-2 py-1">{options}</select></label>
    <button type="submit" class="bg-slate-800 hover:bg-slate-700 text-white font-semibold py-2 px-6 rounded-lg">Apply</button>
  </div>
</form>
<div><span class="block text-sm font-semibold text-slate-700 mb-3">Filter by Designation</span>
<div class="flex flex-wrap gap-2">{"".join(tabs)}</div></div>
{clear}
</div>"""


def render_course_catalog(courses: List[CourseNode], state: CourseFilterState, total: int) -> str:
    header = page_header(
        '<h1 class="font-playfair text-4xl md:text-5xl font-bold mb-4">All Courses</h1>'
        '<p class="text-xl text-blue-100 max-w-2xl">Earn CPE and CFP credits with our comprehensive continuing '
        'education courses designed for financial professionals.</p>',
        width="max-w-6xl",
    )
    count = f'<p class="text-slate-600">Showing <strong>{len(courses)}</strong> of {total} courses</p>'
    if courses:
        results = f'<div class="{_GRID}">{"".join(course_card(c) for c in courses)}</div>'
    else:
        results = _EMPTY.format("No courses match your filters.")
    return f"""{header}
<section class="py-12 px-6 bg-slate-50"><div class="max-w-6xl mx-auto space-y-6">
{_filter_form(state)}
{count}
{results}
</div></section>"""


# ── Erreurs ─────────────────────────────────────────────────────────────────

def _message(title: str, body: str) -> str:
    return (
        '<div class="min-h-[60vh] flex items-center justify-center px-6"><div class="text-center">'
        f'<h1 class="text-2xl font-bold text-slate-800 mb-4">{esc(title)}</h1>{body}</div></div>'
    )


def render_not_found() -> str:
    return _message(
        "Page Not Found",
        '<p class="text-slate-600 mb-6">The page you are looking for does not exist or has been moved.</p>'
        '<a href="/" class="inline-block bg-slate-800 hover:bg-slate-700 text-white font-semibold py-2 px-6 rounded-lg">Back to Home</a>',
    )


def render_preview_error() -> str:
    return _message("Preview Error", '<p class="text-slate-600">No post ID found for preview.</p>')


def render_preview_unavailable() -> str:
    return _message(
        "Preview Not Available",
        '<p class="text-slate-600 mb-4">Unable to load preview content. This might be because:</p>'
        '<ul class="text-slate-500 text-left max-w-md mx-auto list-disc pl-6">'
        "<li>The post doesn&apos;t exist</li>"
        "<li>You don&apos;t have permission to view it</li>"
        "<li>The preview token has expired</li></ul>",
    )
