import logging
import time
from fastapi import FastAPI, Request
from starlette.middleware.gzip import GZipMiddleware
from devops_demo.core.errors import original_url

logger = logging.getLogger("devops_demo.access")

CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "style-src 'self' 'unsafe-inline'",
    "script-src 'self' 'unsafe-inline'",
    "img-src 'self' data: https:",
])

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
}

GZIP_MINIMUM_SIZE = 1000


def register_compression(app: FastAPI):
    """
    Gzip sits innermost, next to the plain responses, so it still sees
    Content-Length and can apply the minimum size.

    Must run before register_error_handlers() and register_middleware().
    """
    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)


def register_middleware(app: FastAPI):
    """
    Security headers and access log.

    Must run after register_error_handlers() so that 500 responses from the
    error boundary still get headers and an access log line.
    """

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start_time = time.perf_counter()
        url = original_url(request)
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{request.method} {url} {response.status_code}",
            extra={
                "method": request.method,
                "path": url,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent"),
            },
        )
        return response
