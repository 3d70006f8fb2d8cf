"""
Fetchers WordPress — un appel GraphQL par besoin de page.

Chaque fetcher renvoie le QueryResult brut ; la conversion en modèles
(core.schemas.parse_content_node) reste du ressort de l'appelant.
"""
import logging
from typing import Any, Dict, List, Optional

from . import queries as q
from .client import QueryResult, WordPressClient, get_client

log = logging.getLogger(__name__)

# Pages gérées hors WordPress : jamais listées dans le sitemap
EXCLUDED_URIS = {"/", "/login/", "/register/", "/forgot-password/"}

ALL_ITEMS = 500


def _client(client: Optional[WordPressClient]) -> WordPressClient:
    return client or get_client()


def normalize_uri(uri: str) -> str:
    uri = uri or "/"
    return uri if uri.startswith("/") else f"/{uri}"


# ── Helpers ─────────────────────────────────────────────────────────────────

def extract_nodes(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """{"nodes": [...]} → [...] (liste vide si connexion absente)."""
    if not isinstance(connection, dict):
        return []
    return [n for n in connection.get("nodes") or [] if isinstance(n, dict)]


def has_data(result: QueryResult) -> bool:
    return result.data is not None and result.error is None


def get_typename(node: Optional[Dict[str, Any]]) -> Optional[str]:
    return node.get("__typename") if isinstance(node, dict) else None


# ── Articles ────────────────────────────────────────────────────────────────

def get_all_posts(first: int = 10, after: Optional[str] = None,
                  client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_POSTS, {"first": first, "after": after})


def get_post(slug: str, as_preview: bool = False,
             client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_POST_BY_SLUG, {"slug": slug, "asPreview": as_preview})


def get_all_post_slugs(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_ALL_POST_SLUGS, {"first": ALL_ITEMS})


# ── Pages ───────────────────────────────────────────────────────────────────

def get_all_pages(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_PAGES, {"first": 100})


def get_page(uri: str, client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_PAGE_BY_URI, {"uri": normalize_uri(uri)})


def get_all_page_uris(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_ALL_PAGE_URIS, {"first": ALL_ITEMS})


# ── Nœud générique ──────────────────────────────────────────────────────────

def get_content_node_by_uri(uri: str, client: Optional[WordPressClient] = None) -> QueryResult:
    """Résolveur principal du routage dynamique : page, article, formation, taxonomie…"""
    return _client(client).query(q.GET_CONTENT_BY_URI, {"uri": normalize_uri(uri)})


def get_content_type_by_uri(uri: str, client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_CONTENT_TYPE_BY_URI, {"uri": normalize_uri(uri)})


def get_preview_node(database_id: str, client: Optional[WordPressClient] = None) -> QueryResult:
    """Révision de travail (brouillon) d'un contenu, par identifiant numérique."""
    return _client(client).query(q.GET_PREVIEW_CONTENT, {"id": str(database_id), "asPreview": True})


# ── Formations ──────────────────────────────────────────────────────────────

def get_all_courses(first: int = 50, after: Optional[str] = None,
                    client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_COURSES, {"first": first, "after": after})


def get_course_cards(first: int = 50, after: Optional[str] = None,
                     client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_COURSE_CARDS, {"first": first, "after": after})


def get_course(slug: str, client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_COURSE_BY_SLUG, {"slug": slug})


def get_all_course_slugs(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_ALL_COURSE_SLUGS, {"first": ALL_ITEMS})


def get_featured_courses(count: int = 6, client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_FEATURED_COURSES, {"first": count})


# ── Site ────────────────────────────────────────────────────────────────────

def get_site_settings(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_SITE_SETTINGS)


def get_site_data(client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_SITE_DATA)


def get_menu(location: str = "PRIMARY", client: Optional[WordPressClient] = None) -> QueryResult:
    return _client(client).query(q.GET_MENU, {"location": location})


# ── Sitemap ─────────────────────────────────────────────────────────────────

def collect_static_uris(client: Optional[WordPressClient] = None) -> List[str]:
    """
    URIs publiques connues de WordPress (pages + formations), dédoublonnées.

    Une requête en échec est journalisée puis ignorée : le sitemap est
    partiel plutôt qu'absent.
    """
    client = _client(client)
    uris: List[str] = []

    pages = get_all_page_uris(client)
    if has_data(pages):
        for node in extract_nodes(pages.data.get("pages")):
            uri = node.get("uri")
            if uri and uri not in EXCLUDED_URIS:
                uris.append(uri)
    else:
        log.warning("Sitemap : pages indisponibles (%s)", pages.error)

    courses = get_all_course_slugs(client)
    if has_data(courses):
        for node in extract_nodes(courses.data.get("flmsCourses")):
            uri = node.get("uri") or (f"/course/{node['slug']}" if node.get("slug") else None)
            if uri:
                uris.append(uri)
    else:
        log.warning("Sitemap : formations indisponibles (%s)", courses.error)

    return list(dict.fromkeys(uris))
