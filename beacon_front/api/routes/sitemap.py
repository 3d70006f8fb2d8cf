"""sitemap.xml + robots.txt — fermés en recette (SITE_ENV=staging)."""
from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from ... import config
from ...wp import fetchers
from ..rendering import wp

router = APIRouter(tags=["SEO"])

# Routes servies par le front lui-même
FRONT_URIS = ["/", "/blog/", "/courses/"]


def _absolute(request: Request, uri: str) -> str:
    return str(request.base_url).rstrip("/") + uri


@router.get("/sitemap.xml")
def sitemap_xml(request: Request):
    uris = [] if config.is_staging() else FRONT_URIS + fetchers.collect_static_uris(client=wp(request))
    urls = "".join(
        f"<url><loc>{escape(_absolute(request, uri))}</loc></url>"
        for uri in dict.fromkeys(uris)
    )
    xml = ('<?xml version="1.0" encoding="UTF-8"?>'
           f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{urls}</urlset>')
    return Response(xml, media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots_txt(request: Request):
    if config.is_staging():
        return "User-agent: *\nDisallow: /\n"
    return f"User-agent: *\nAllow: /\n\nSitemap: {_absolute(request, '/sitemap.xml')}\n"
