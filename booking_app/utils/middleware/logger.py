import logging
import time
import uuid
import contextvars
from typing import Optional, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Request id of the request being served, read by RequestIdFilter
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp every LogRecord with the current request id ("-" outside a request)."""
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        return True


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Install a single stream handler on the root logger.

    Safe to call more than once (app factory in tests, uvicorn reload):
    an already configured root logger is left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Per-request access log.

    - Assigns a request id and exposes it through ``request_id_ctx``.
    - Logs start (method, path, client) and end (status, duration_ms).
    - Request bodies are never read here so handlers still get them.
    """

    async def dispatch(self, request: Request, call_next):
        req_id = str(uuid.uuid4())
        token = request_id_ctx.set(req_id)

        logger = logging.getLogger("booking_app.access")
        start = time.time()

        try:
            client_host = request.client.host if request.client else None
            logger.info(
                "request.start %s %s",
                request.method,
                request.url.path,
                extra={"client": client_host},
            )

            response = await call_next(request)

            duration_ms = int((time.time() - start) * 1000)
            logger.info(
                "request.end %s %s -> %s (%dms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
            response.headers["X-Request-ID"] = req_id
            return response

        except Exception:
            duration_ms = int((time.time() - start) * 1000)
            logger.exception("request.error %s %s (%dms)", request.method, request.url.path, duration_ms)
            raise
        finally:
            request_id_ctx.reset(token)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
