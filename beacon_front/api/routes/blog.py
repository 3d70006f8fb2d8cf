"""Blog — index des articles + article par slug."""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...core.schemas import PostNode, parse_content_node
from ...renderer.layout import render_document
from ...templates.site import render_blog_index
from ...wp import fetchers
from ..preview import read_session
from ..rendering import cached_page, node_from, render_node_document, render_preview_document, wp

router = APIRouter(tags=["Blog"])

POSTS_PER_PAGE = 12


@router.get("/blog", response_class=HTMLResponse)
@router.get("/blog/", response_class=HTMLResponse, include_in_schema=False)
def blog_index(request: Request):
    def build():
        result = fetchers.get_all_posts(first=POSTS_PER_PAGE, client=wp(request))
        posts = []
        if result.ok:
            for raw in fetchers.extract_nodes(result.data.get("posts")):
                node = parse_content_node({"__typename": "Post", **raw})
                if isinstance(node, PostNode):
                    posts.append(node)
        return render_document(render_blog_index(posts), "Blog",
                               "Latest news and insights for financial professionals"), 200

    return cached_page(request, build, preview=read_session(request).enabled)


@router.get("/blog/{slug}", response_class=HTMLResponse)
def blog_post(slug: str, request: Request):
    preview = read_session(request).enabled

    def build():
        node = node_from(fetchers.get_post(slug, as_preview=preview, client=wp(request)), "post")
        if node is None:
            return None, 404
        if preview:
            return render_preview_document(request, node), 200
        return render_node_document(request, node), 200

    return cached_page(request, build, preview=preview)
