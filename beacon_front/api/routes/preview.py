"""
Prévisualisation des brouillons WordPress.

    WordPress → /api/preview?p=123&token=xxx → cookies de session → /preview/<...>
    /api/exit-preview → cookies supprimés → retour à la page publique
"""
import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ...renderer.layout import render_document, render_preview_banner
from ...templates.site import render_preview_error, render_preview_unavailable
from ...wp import fetchers
from ..preview import (
    build_preview_url, clear_session, preview_target_from_path, read_session,
    safe_redirect, start_session, verify_preview_token,
)
from ..rendering import NOINDEX, node_from, render_node_document, wp

log = logging.getLogger(__name__)

router = APIRouter(tags=["Preview"])


@router.get("/api/preview")
def enter_preview(
    p: Optional[str] = None,
    post_id: Optional[str] = None,
    preview_id: Optional[str] = None,
    token: Optional[str] = None,
    post_type: str = "post",
    uri: Optional[str] = None,
):
    """Point d'entrée du bouton « Preview » de WordPress."""
    requested_id = p or post_id
    preview_token = preview_id or token
    if not requested_id and not preview_token:
        return JSONResponse({"error": "Missing preview parameters"}, status_code=400)

    if preview_token:
        verification = verify_preview_token(preview_token)
        if not verification.valid:
            return JSONResponse({"error": "Invalid preview token"}, status_code=401)
        resolved_id = str(verification.post_id or requested_id or "")
        if not resolved_id:
            return JSONResponse({"error": "Missing post ID"}, status_code=400)
        resolved_type = verification.post_type or post_type
        resolved_uri = verification.uri or uri
    else:
        log.warning("Prévisualisation sans jeton pour le contenu %s", requested_id)
        resolved_id, resolved_type, resolved_uri = requested_id, post_type, uri

    response = RedirectResponse(build_preview_url(resolved_id, resolved_type, resolved_uri), status_code=307)
    start_session(response, resolved_id, resolved_type)
    return response


@router.get("/api/exit-preview")
def exit_preview(redirect: Optional[str] = None):
    response = RedirectResponse(safe_redirect(redirect), status_code=307)
    clear_session(response)
    return response


@router.post("/api/exit-preview")
def exit_preview_api():
    response = JSONResponse({"success": True})
    clear_session(response)
    return response


def _preview_page(body: str, banner: str, status_code: int = 200) -> HTMLResponse:
    html = render_document(body, "Preview Mode", preview_banner=banner, with_chrome=False)
    return HTMLResponse(html, status_code=status_code, headers=NOINDEX)


@router.get("/preview/{path:path}", response_class=HTMLResponse)
def preview_page(path: str, request: Request):
    """Rendu du brouillon : jamais mis en cache, toujours noindex."""
    session = read_session(request)
    if not session.enabled:
        return RedirectResponse("/api/exit-preview", status_code=307)

    post_id, post_type = session.post_id, session.post_type
    if not post_id:
        target = preview_target_from_path(path)
        post_id, post_type = target["post_id"], target["post_type"] or post_type

    if not post_id:
        return _preview_page(render_preview_error(), render_preview_banner(request.url.path, post_type))

    node = node_from(fetchers.get_preview_node(post_id, client=wp(request)), "contentNode")
    if node is None:
        log.warning("Prévisualisation indisponible pour le contenu %s", post_id)
        banner = render_preview_banner(request.url.path, post_type, post_id)
        return _preview_page(render_preview_unavailable(), banner)

    banner = render_preview_banner(request.url.path, node.typename, node.database_id or post_id)
    html = render_node_document(request, node, preview=True, preview_banner=banner)
    return HTMLResponse(html, headers=NOINDEX)
