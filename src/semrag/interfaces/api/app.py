"""Falcon ASGI application."""

import falcon
import falcon.asgi
from falcon.asgi import App
from loguru import logger

from semrag.interfaces.api.resources.chat import ChatResource
from semrag.interfaces.api.resources.documents import DocumentsResource
from semrag.interfaces.api.resources.health import HealthResource
from semrag.interfaces.api.resources.ingest import IngestResource


async def _log_exception(req, resp, ex, params) -> None:
    logger.opt(exception=ex).error(f"Unhandled error on {req.method} {req.path}")
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    ingest_resource: IngestResource,
    chat_resource: ChatResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/ingest", ingest_resource)
    app.add_route("/v1/chat", chat_resource)
    return app
