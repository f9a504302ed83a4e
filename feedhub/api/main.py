import logging
import re
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from feedhub.config import ConfigError, Settings, SourceRegistry, load_sources
from feedhub.pipeline.collect import news_page, product_page, video_page
from feedhub.utils.log import setup_logging

logger = logging.getLogger(__name__)

NEWS_DEFAULT_LIMIT = 30
PRODUCT_DEFAULT_LIMIT = 20
VIDEO_DEFAULT_LIMIT = 30
MAX_PAGE_SIZE = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: Optional[str], default: int) -> int:
    """Lê o inteiro do início da string ("12abc" -> 12); sem número, usa o default."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else default


def page_window(offset: Optional[str], limit: Optional[str], default_limit: int):
    off = max(parse_int(offset, 0), 0)
    lim = parse_int(limit, default_limit)
    if lim < 1:
        lim = default_limit
    return off, min(lim, MAX_PAGE_SIZE)
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # registro de fontes carregado uma vez e imutável durante o processo
        try:
            app.state.registry = load_sources(settings.sources_path)
        except ConfigError:
            # o processo sobe mesmo assim; os endpoints respondem 500 até o arquivo ser corrigido
            logger.exception("Could not load sources at startup")
            app.state.registry = None
        yield

    app = FastAPI(title="feedhub", lifespan=lifespan)
    app.state.settings = settings
    app.state.registry = None

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    # Compressão gzip para reduzir payloads das listas
    app.add_middleware(GZipMiddleware, minimum_size=512)

    def get_registry(request: Request) -> SourceRegistry:
        """Lido dentro do try de cada handler: erro de configuração vira 500 em JSON."""
        state = request.app.state
        if state.registry is None:
            state.registry = load_sources(settings.sources_path)
        return state.registry

    @app.get("/health")
    def health():
        return {"status": "ok", "ts": int(time.time())}

    @app.get("/api/rss")
    def rss(
        request: Request,
        offset: Optional[str] = None,
        limit: Optional[str] = None,
        language: Optional[str] = None,
    ):
        off, lim = page_window(offset, limit, NEWS_DEFAULT_LIMIT)
        if language:
            logger.debug(f"[rss] language filter '{language}' ignored")
        try:
            page = news_page(get_registry(request), off, lim, settings)
        except Exception:
            logger.exception("Error in RSS API")
            return JSONResponse({"error": "Failed to fetch RSS feeds"}, status_code=500)
        return {
            "items": [n.model_dump() for n in page.items],
            "hasMore": page.hasMore,
            "total": page.total,
        }

    @app.get("/api/product")
    def products(
        request: Request,
        offset: Optional[str] = None,
        limit: Optional[str] = None,
    ):
        off, lim = page_window(offset, limit, PRODUCT_DEFAULT_LIMIT)
        try:
            page = product_page(get_registry(request), off, lim, settings)
        except Exception:
            logger.exception("Error in product API")
            return JSONResponse({"error": "Failed to fetch products"}, status_code=500)
        return {
            "products": [p.model_dump() for p in page.items],
            "hasMore": page.hasMore,
            "total": page.total,
        }

    @app.get("/api/videos")
    def videos(
        request: Request,
        offset: Optional[str] = None,
        limit: Optional[str] = None,
    ):
        off, lim = page_window(offset, limit, VIDEO_DEFAULT_LIMIT)
        try:
            page = video_page(get_registry(request), off, lim, settings)
        except Exception:
            logger.exception("Error in videos API")
            return JSONResponse({"error": "Failed to fetch videos"}, status_code=500)
        return {
            "items": [v.model_dump() for v in page.items],
            "hasMore": page.hasMore,
            "total": page.total,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("feedhub.api.main:app", host="0.0.0.0", port=8000, reload=True)
