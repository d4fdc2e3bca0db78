"""FastAPI application configuration.

Main entry point for the Pwned Password Checker REST API.
Implements rate limiting, security headers, HTTPS enforcement and
restrictive CORS around the k-Anonymity breach check.
"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.dependencies import limiter
from api.routes import health_router, tools_router
from pwned import __version__, configure_logging
from pwned.config import REQUIRE_HTTPS


configure_logging()

app = FastAPI(
    title="Pwned Password Checker API",
    description="""
    Breach detection for passwords with:
    - HaveIBeenPwned range API (k-Anonymity, only a 5-char hash prefix leaves the server)
    - No storage of passwords, hashes or query history
    - Rate limiting for abuse protection
    """,
    version=__version__,
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Enforce HTTPS connections when REQUIRE_HTTPS is enabled.

    Passwords arrive in the request body, so without TLS they are visible
    to anyone monitoring network traffic. Health checks are exempted to
    allow load balancer probes.
    """
    if REQUIRE_HTTPS:
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Cache-Control matters most here: breach verdicts must not be cached
    by intermediaries.
    """
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Prevent caching of sensitive responses
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    return response


# CORS configuration - explicitly restricted
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
