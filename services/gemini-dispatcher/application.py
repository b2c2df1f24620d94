"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from policy_mail_common import ErrorEnvelope
from policy_mail_common.logging import setup_logging

from dependencies import get_config
from routes import gemini_router

logger = setup_logging()


def create_app() -> FastAPI:
    """Builds the dispatcher app with CORS headers on every response."""
    app = FastAPI(title="Policy Mail Gemini Dispatcher")
    app.include_router(gemini_router)

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(get_config().cors.as_headers())
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled dispatcher error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content=ErrorEnvelope(error=str(exc)).model_dump(),
            headers=get_config().cors.as_headers(),
        )

    return app
