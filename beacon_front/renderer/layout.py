"""
Layout du site — document HTML complet (head, header, footer, bannières).
"""
from datetime import date
from html import escape
from typing import Optional
from urllib.parse import quote

from .. import config

SITE_NAME = "Beacon Hill Financial Educators"
SITE_DESCRIPTION = "Professional continuing education courses for financial professionals"
TITLE_TEMPLATE = "%s | BHFE"

NAVIGATION = [
    ("Home",    "/"),
    ("Courses", "/courses"),
    ("Blog",    "/blog"),
    ("About",   "/about"),
    ("Contact", "/contact"),
]

FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&family=Playfair+Display:wght@600;700&display=swap"
TAILWIND_URL = "https://cdn.tailwindcss.com?plugins=typography"

_LOGO = """<div class="w-10 h-10 bg-amber-500 rounded-lg flex items-center justify-center">
        <span class="text-slate-900 font-bold text-lg">BH</span>
      </div>"""


def page_title(title: Optional[str]) -> str:
    return TITLE_TEMPLATE % title if title else SITE_NAME


# ── Header / Footer ─────────────────────────────────────────────────────────

def render_header() -> str:
    links = "\n".join(
        f'      <a href="{href}" class="px-4 py-2 rounded-lg text-sm font-medium text-slate-200 '
        f'hover:text-white hover:bg-slate-800 transition-colors">{label}</a>'
        for label, href in NAVIGATION
    )
    return f"""<header class="bg-slate-900 text-white sticky top-0 z-50 shadow-lg">
  <div class="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
    <div class="flex items-center justify-between h-16">
      <a href="/" class="flex items-center gap-3 hover:opacity-90 transition-opacity">
      {_LOGO}
      <div class="hidden sm:block">
        <span class="font-playfair text-xl font-bold">Beacon Hill</span>
        <span class="text-amber-400 text-sm block -mt-1">Financial Educators</span>
      </div>
      </a>
      <nav class="flex flex-wrap items-center gap-1">
{links}
      <a href="/courses" class="ml-4 px-5 py-2 bg-amber-500 hover:bg-amber-400 text-slate-900 font-semibold rounded-lg transition-colors">Browse Courses</a>
      </nav>
    </div>
  </div>
</header>"""


def render_footer() -> str:
    return f"""<footer class="bg-slate-900 text-slate-300">
  <div class="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8 py-12">
    <div class="grid grid-cols-1 md:grid-cols-4 gap-8">
      <div class="md:col-span-2">
        <div class="flex items-center gap-3 mb-4">
          {_LOGO}
          <div>
            <span class="font-playfair text-xl font-bold text-white">Beacon Hill</span>
            <span class="text-amber-400 text-sm block -mt-1">Financial Educators</span>
          </div>
        </div>
        <p class="text-slate-400 max-w-md">Professional continuing education courses for financial professionals.
        Earn CPE, CFP, and other credits with our comprehensive course library.</p>
      </div>
      <div>
        <h3 class="text-white font-semibold mb-4">Quick Links</h3>
        <ul class="space-y-2">
          <li><a href="/courses" class="hover:text-amber-400 transition-colors">All Courses</a></li>
          <li><a href="/about" class="hover:text-amber-400 transition-colors">About Us</a></li>
          <li><a href="/contact" class="hover:text-amber-400 transition-colors">Contact</a></li>
          <li><a href="/blog" class="hover:text-amber-400 transition-colors">Blog</a></li>
        </ul>
      </div>
      <div>
        <h3 class="text-white font-semibold mb-4">Contact</h3>
        <ul class="space-y-2 text-slate-400">
          <li>support@beaconhillfe.com</li>
          <li>1-800-BHFE-EDU</li>
        </ul>
      </div>
    </div>
    <div class="border-t border-slate-700 mt-8 pt-8 text-center text-slate-500 text-sm">
      <p>&copy; {date.today().year} {SITE_NAME}. All rights reserved.</p>
    </div>
  </div>
</footer>"""


# ── Bannières ───────────────────────────────────────────────────────────────

def render_staging_badge() -> str:
    return ('<div class="fixed top-0 left-0 z-[99999] bg-red-600 text-white text-xs font-bold uppercase '
            'tracking-wider px-3 py-1.5 shadow-lg pointer-events-none select-none" '
            'style="transform:rotate(-45deg) translateX(-30%) translateY(50%);" aria-hidden="true">STAGING</div>')


def exit_preview_url(path: str) -> str:
    """Lien « Exit Preview » : retour vers la version publique de la page."""
    public_path = path.replace("/preview", "", 1) or "/"
    return f"/api/exit-preview?redirect={quote(public_path, safe='')}"


def render_preview_banner(path: str, post_type: Optional[str] = None, post_id: Optional[str] = None) -> str:
    label = ""
    if post_type:
        suffix = f" #{escape(str(post_id))}" if post_id else ""
        label = f'<span class="ml-2 text-white/90 text-sm">({escape(post_type)}{suffix})</span>'
    return f"""<div class="fixed top-0 left-0 right-0 z-[9999] bg-gradient-to-r from-amber-500 via-orange-500 to-amber-500 text-white py-3 px-4 shadow-lg" role="alert" aria-live="polite">
  <div class="max-w-7xl mx-auto flex items-center justify-between gap-4 flex-wrap">
    <div class="flex items-center gap-3">
      <span class="font-bold text-lg">Preview Mode</span>{label}
    </div>
    <p class="text-sm text-white/90 hidden sm:block">You are viewing unpublished content. This page is not visible to the public.</p>
    <a href="{escape(exit_preview_url(path))}" class="inline-flex items-center gap-2 bg-white text-orange-600 font-semibold px-4 py-2 rounded-lg hover:bg-orange-100 transition-colors shadow-md flex-shrink-0">Exit Preview</a>
  </div>
</div>"""


# ── Document ────────────────────────────────────────────────────────────────

def render_document(
    body_html: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    preview_banner: str = "",
    with_chrome: bool = True,
) -> str:
    """
    Document HTML complet.

    `preview_banner` : HTML de la bannière (voir render_preview_banner), décale le contenu.
    `with_chrome=False` : pas de header/footer (pages d'erreur de prévisualisation).
    """
    meta_description = description if description is not None else SITE_DESCRIPTION
    staging = render_staging_badge() if config.is_staging() else ""
    robots = '<meta name="robots" content="noindex, nofollow">' if config.is_staging() or preview_banner else ""
    main = f'<main class="flex-grow">{body_html}</main>'
    if preview_banner:
        main = f'<div class="pt-16">{main}</div>'
    chrome_top = render_header() if with_chrome else ""
    chrome_bottom = render_footer() if with_chrome else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(page_title(title))}</title>
  <meta name="description" content="{escape(meta_description)}">
  {robots}
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="stylesheet" href="{FONT_URL}">
  <script src="{TAILWIND_URL}"></script>
</head>
<body class="antialiased min-h-screen flex flex-col">
{staging}
{preview_banner}
{chrome_top}
{main}
{chrome_bottom}
</body>
</html>"""
