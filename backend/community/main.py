import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session, sessionmaker
from starlette.middleware.trustedhost import TrustedHostMiddleware

from community.api.router import router
from community.core.config import Settings, settings
from community.core.logging import configure_logging
from community.core.security import now_utc
from community.db.session import build_engine, build_session_factory
from community.services.notifications import Notifier, build_notifier
from community.services.otp import OtpService

logger = logging.getLogger(__name__)


def create_app(
    cfg: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
    notifier: Notifier | None = None,
    clock=None,
) -> FastAPI:
    cfg = cfg or settings
    configure_logging(cfg.LOG_LEVEL)

    app = FastAPI(title="Community Directory", version="0.1.0")
    app.state.settings = cfg
    app.state.session_factory = session_factory or build_session_factory(build_engine(cfg))
    app.state.notifier = notifier or build_notifier(cfg)
    app.state.otp_service = OtpService(cfg, clock=clock or now_utc)

    allowed_hosts = [h.strip() for h in cfg.ALLOWED_HOSTS.split(",") if h.strip()]
    if not allowed_hosts:
        allowed_hosts = ["*"]
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    @app.middleware("http")
    async def security_headers_middleware(request: Request, call_next):
        response: Response = await call_next(request)
        if cfg.SECURITY_HEADERS_ENABLED:
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
            response.headers["Content-Security-Policy"] = "frame-ancestors 'none'; base-uri 'self'"
            if cfg.ENV != "dev":
                response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Server error"})

    app.include_router(router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
