# api/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from api.config import Settings
from api.metrics import UPSTREAM_ERRORS, MetricsMiddleware
from api.routers import eq_rows
from upstream.afad import AfadClient
from upstream.errors import UpstreamError

log = logging.getLogger("eq_rows.api")


def create_app(settings: Optional[Settings] = None, client: Optional[AfadClient] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Earthquake Rows",
        version="0.1",
        description="Recent AFAD earthquakes rendered as HTML table rows for a local page.",
    )
    app.state.settings = settings
    app.state.afad_client = client or AfadClient(settings.api_url, timeout=settings.timeout)

    app.add_middleware(MetricsMiddleware)

    @app.exception_handler(UpstreamError)
    async def upstream_error(request: Request, exc: UpstreamError):
        UPSTREAM_ERRORS.labels(kind=exc.kind).inc()
        log.error("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc)
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    # --- Route table
    app.include_router(eq_rows.router)
    app.mount("/static", StaticFiles(directory=settings.static_dir, html=True), name="static")

    @app.get("/", include_in_schema=False)
    def index():
        return RedirectResponse(url="/static/")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics():
        data = generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)

    return app
