"""
Pages — accueil + route attrape-tout (nœud WordPress par URI).
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...core.schemas import CourseNode, parse_content_node
from ...renderer.layout import render_document
from ...templates.site import render_home
from ...wp import fetchers
from ..preview import read_session
from ..rendering import (
    cached_page, load_draft, node_from, render_node_document, render_preview_document, wp,
)

log = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    def build():
        courses_result = fetchers.get_featured_courses(6, client=wp(request))
        settings_result = fetchers.get_site_data(client=wp(request))
        courses = []
        if courses_result.ok:
            for raw in fetchers.extract_nodes(courses_result.data.get("flmsCourses")):
                node = parse_content_node({"__typename": "FlmsCourse", **raw})
                if isinstance(node, CourseNode):
                    courses.append(node)
        settings = (settings_result.data or {}).get("generalSettings") if settings_result.ok else None
        body = render_home(courses, settings, error=courses_result.error)
        return render_document(body, None), 200

    return cached_page(request, build, preview=read_session(request).enabled)


@router.get("/{uri:path}", response_class=HTMLResponse)
def content_by_uri(uri: str, request: Request):
    """Page, article, formation ou taxonomie : résolveur de template selon `__typename`."""
    preview = read_session(request).enabled

    def build():
        result = fetchers.get_content_node_by_uri(uri, client=wp(request))
        node = node_from(result, "nodeByUri")
        if node is None:
            log.info("Aucun contenu pour /%s (%s)", uri, result.error or "nodeByUri vide")
            return None, 404
        if preview:
            return render_preview_document(request, load_draft(request, node)), 200
        return render_node_document(request, node), 200

    return cached_page(request, build, preview=preview)
