"""
beacon_front — FastAPI app
Démarrer : uvicorn beacon_front.api.main:app --reload --port 3000
"""
import logging
from typing import Optional

from fastapi import FastAPI

from .. import __version__, config
from ..blocks import BlockRegistry, create_default_registry
from ..templates import TemplateRegistry, create_default_templates
from ..wp.client import WordPressClient
from .cache import PageCache
from .routes import blog, courses, pages, preview, sitemap

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def create_app(
    client: Optional[WordPressClient] = None,
    blocks: Optional[BlockRegistry] = None,
    templates: Optional[TemplateRegistry] = None,
    cache: Optional[PageCache] = None,
) -> FastAPI:
    """
    App complète. Les registries sont construits une fois ici puis lus
    par les routes via `request.app.state` ; les tests injectent les leurs.
    """
    app = FastAPI(title="Beacon Hill — front headless", version=__version__, docs_url=None, redoc_url=None)

    app.state.wp = client or WordPressClient()
    app.state.blocks = blocks or create_default_registry()
    app.state.templates = templates or create_default_templates()
    app.state.cache = cache or PageCache(ttl=config.revalidate_seconds())

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "beacon_front", "version": __version__}

    app.include_router(sitemap.router)
    app.include_router(preview.router)
    app.include_router(blog.router)
    app.include_router(courses.router)
    # catch-all /{uri:path} : toujours en dernier
    app.include_router(pages.router)

    log.info("App prête — WordPress %s (%s, %d blocs, revalidation %ss)",
             config.wordpress_url(), config.app_env(), len(app.state.blocks), app.state.cache.ttl)
    return app


app = create_app()
