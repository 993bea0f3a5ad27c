"""CORS middleware for the browser frontend."""

import falcon
import falcon.asgi

_ALLOW_METHODS = "GET, POST, OPTIONS"
_ALLOW_HEADERS = "Content-Type"


class CORSMiddleware:
    """Adds CORS headers for allowed origins and answers OPTIONS preflight.

    An origin list containing ``*`` allows any origin.
    """

    def __init__(self, origins: list[str]) -> None:
        self._allow_any = "*" in origins
        self._origins = [o for o in origins if o != "*"]

    def _allowed_origin(self, origin: str | None) -> str | None:
        if self._allow_any:
            return "*"
        if origin and origin in self._origins:
            return origin
        return self._origins[0] if self._origins else None

    def _apply(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        allowed = self._allowed_origin(req.get_header("Origin"))
        if allowed is None:
            return
        resp.set_header("Access-Control-Allow-Origin", allowed)
        resp.set_header("Access-Control-Allow-Methods", _ALLOW_METHODS)
        resp.set_header("Access-Control-Allow-Headers", _ALLOW_HEADERS)
        resp.set_header("Access-Control-Max-Age", "86400")
        if allowed != "*":
            resp.append_header("Vary", "Origin")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._apply(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        if req.method != "OPTIONS":
            self._apply(req, resp)
