"""
FastAPI application entry point.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import LoggingMiddleware, RequestIDMiddleware
from api.routes import orders as orders_routes
from api.routes import payments as payments_routes
from core.config import settings
from core.exceptions import register_exception_handlers
from core.logging_config import configure_logging, get_logger
from core.settings import notification_settings, payment_settings
from infrastructure.external.notifications import get_notification_channel


# Configure logging explicitly at the entry point, not as an import side effect
configure_logging()
logger = get_logger(__name__)


async def log_startup_diagnostics() -> None:
    """Report which integrations are configured and probe the mail transport.

    Nothing here stops the server: a missing key or an unreachable SMTP host
    is logged and requests keep being served.
    """
    logger.info(
        "server_started",
        service=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
        port=settings.PORT,
        frontend_url=settings.FRONTEND_URL,
    )
    stripe_settings = payment_settings.stripe
    logger.info(
        "integrations_configured",
        stripe_secret_key=bool(stripe_settings.secret_key),
        stripe_webhook_secret=bool(stripe_settings.webhook_secret),
        notification_backend=notification_settings.backend,
    )
    if not stripe_settings.secret_key:
        logger.warning("stripe_secret_key_missing")
    if not stripe_settings.webhook_secret:
        logger.warning("stripe_webhook_secret_missing")

    if not notification_settings.verify_on_startup:
        return
    try:
        ready = await get_notification_channel().verify()
    except Exception as exc:
        logger.error("notification_channel_verify_failed", error=str(exc))
        return
    if ready:
        logger.info("notification_channel_ready", backend=notification_settings.backend)
    else:
        logger.warning("notification_channel_unavailable", backend=notification_settings.backend)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await log_startup_diagnostics()
    yield
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Payment intents, Stripe webhooks and order confirmation e-mails for the storefront",
)

# add_middleware wraps: the last one added runs first
# 1. Logging (needs the request id bound)
app.add_middleware(LoggingMiddleware)

# 2. Request ID
app.add_middleware(RequestIDMiddleware)

# 3. CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Process-Time"],
)

register_exception_handlers(app)

app.include_router(payments_routes.router)
app.include_router(orders_routes.router)


@app.get("/", tags=["Root"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME, "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
