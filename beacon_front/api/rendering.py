"""
Helpers communs aux routes : accès à l'état de l'app, document HTML, cache.
"""
import logging
from typing import Callable, Iterable, Optional, Tuple
from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import HTMLResponse

from ..core.schemas import ContentNode, parse_content_node
from ..renderer.layout import render_document, render_preview_banner
from ..templates import RenderContext, node_metadata, render_node
from ..templates.site import render_not_found
from ..wp import fetchers
from ..wp.client import QueryResult, WordPressClient
from .cache import PageCache

log = logging.getLogger(__name__)

NOINDEX = {"X-Robots-Tag": "noindex, nofollow"}


def wp(request: Request) -> WordPressClient:
    return request.app.state.wp


def page_cache(request: Request) -> PageCache:
    return request.app.state.cache


def render_context(request: Request, preview: bool = False) -> RenderContext:
    return RenderContext(blocks=request.app.state.blocks, preview=preview)


def cache_key(request: Request, params: Iterable[str] = ()) -> str:
    """Chemin + paramètres lus par la route (les autres n'entrent pas dans la clé)."""
    wanted = set(params)
    query = urlencode(sorted((k, v) for k, v in request.query_params.multi_items() if k in wanted))
    return f"{request.url.path}?{query}" if query else request.url.path


def node_from(result: QueryResult, field: str) -> Optional[ContentNode]:
    """Nœud `data[field]` d'une réponse GraphQL, ou None (« pas de données »)."""
    if not result.ok:
        return None
    return parse_content_node(result.data.get(field))


def render_node_document(request: Request, node: ContentNode, preview: bool = False,
                         preview_banner: str = "") -> str:
    body = render_node(node, render_context(request, preview), request.app.state.templates)
    title, description = node_metadata(node)
    return render_document(body, title, description or None, preview_banner=preview_banner)


def load_draft(request: Request, node: ContentNode) -> ContentNode:
    """Révision de travail du nœud (asPreview) ; repli sur la version publiée."""
    if not node.database_id:
        return node
    draft = node_from(fetchers.get_preview_node(node.database_id, client=wp(request)), "contentNode")
    if draft is None:
        log.warning("Brouillon indisponible pour %s, version publiée affichée", node.database_id)
        return node
    return draft


def render_preview_document(request: Request, node: ContentNode) -> str:
    banner = render_preview_banner(request.url.path, node.typename, node.database_id)
    return render_node_document(request, node, preview=True, preview_banner=banner)


def not_found() -> HTMLResponse:
    return HTMLResponse(render_document(render_not_found(), "Page Not Found"), status_code=404)


def cached_page(
    request: Request,
    build: Callable[[], Tuple[Optional[str], int]],
    preview: bool = False,
    params: Iterable[str] = (),
) -> HTMLResponse:
    """
    Sert la page depuis le cache, sinon la construit.

    `build` renvoie (html, status) ; html None → 404. Seules les réponses 200
    hors prévisualisation sont mises en cache ; `params` : paramètres de
    query string qui font varier la page.
    """
    cache = page_cache(request)
    key = cache_key(request, params)
    if not preview:
        html = cache.get(key)
        if html is not None:
            return HTMLResponse(html)

    html, status = build()
    if html is None:
        return not_found()
    if status == 200 and not preview:
        cache.set(key, html)
    headers = NOINDEX if preview else None
    return HTMLResponse(html, status_code=status, headers=headers)
