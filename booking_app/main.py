import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking_app.database import MongoStore
from booking_app.errors import BookingAppError
from booking_app.routers.analytics_router import router as analytics_router
from booking_app.routers.booking_router import router as booking_router
from booking_app.routers.movie_router import router as movie_router
from booking_app.routers.user_router import router as user_router
from booking_app.utils.config import Settings, settings as default_settings
from booking_app.utils.middleware.logger import LoggingMiddleware, setup_logging
from booking_app.utils.validation import format_errors

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, mongo_client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """
    Build the API. ``mongo_client`` overrides the client built from
    ``settings.MONGODB_URL`` (tests pass an in-memory one).
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Movie Booking API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    @app.on_event("startup")
    async def startup_event():
        if mongo_client is not None:
            store = MongoStore(mongo_client, settings.MONGODB_DB)
        else:
            store = MongoStore.from_url(settings.MONGODB_URL, settings.MONGODB_DB)
        await store.init()
        app.state.store = store

    @app.exception_handler(BookingAppError)
    async def booking_app_error_handler(request: Request, exc: BookingAppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": format_errors("Request", exc.errors())})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(movie_router)
    app.include_router(user_router)
    app.include_router(booking_router)
    app.include_router(analytics_router)

    return app


app = create_app()


def run():
    import uvicorn

    logger.info("Server running on port %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
