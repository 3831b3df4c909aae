"""
storefront/main.py
JavaMaster storefront API: app wiring, middleware and exception handlers
"""
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config.feature_flags import feature_flags
from storefront.config.settings import ENVIRONMENT, ENV_FILE, HOST, LOG_LEVEL, PORT, allowed_origins
from storefront.database import AsyncSessionLocal, close_db, init_db, seed_catalogue_if_empty
from storefront.errors import ERROR_MAPPING, APIError, ErrorCode, get_error_summary
from storefront.exceptions import StorefrontException
from storefront.routes import router
from storefront.routes.auth import limiter

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
DOCS_ENABLED = ENVIRONMENT == "development"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    logger.info(f"Loaded .env from: {ENV_FILE}")

    try:
        await init_db()
        logger.info("Database connected successfully")

        if feature_flags.FEATURE_SEED_ON_STARTUP:
            async with AsyncSessionLocal() as session:
                inserted = await seed_catalogue_if_empty(session)
                logger.info(f"✓ Course catalogue: {inserted} courses seeded")
    except Exception as e:
        logger.error(f"Failed to connect to database: {str(e)}")
        raise

    yield

    logger.info("Shutting down application...")
    try:
        await close_db()
    except Exception as e:
        logger.error(f"Error closing database connection: {str(e)}")


app = FastAPI(
    title="JavaMaster Storefront API",
    description="Course catalogue, cart, checkout and back-office for JavaMaster",
    version=APP_VERSION,
    docs_url="/docs" if DOCS_ENABLED else None,
    redoc_url="/redoc" if DOCS_ENABLED else None,
    lifespan=lifespan
)

# Attach rate limiter to the app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
logger.info(f"✓ Rate limiter configured (enabled={limiter.enabled})")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


# ============================================
# Exception handlers
# ============================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    422 envelope. `message` is the first violated rule so forms can show
    it directly; `details` lists every failure.
    """
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    error_details = []
    for error in exc.errors():
        error_details.append({
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "type": error.get("type")
        })

    message = error_details[0]["msg"] if error_details else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "error": "Validation Error",
            "message": message,
            "code": ErrorCode.VALIDATION_ERROR,
            "details": {"errors": error_details}
        }
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP exception on {request.url.path}: {exc.detail}")

    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=getattr(exc, "headers", None)
        )

    error, code = ERROR_MAPPING.get(
        exc.status_code,
        ("Error", ErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ErrorCode.INVALID_INPUT)
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": error,
            "message": str(exc.detail),
            "code": code
        }
    )


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    logger.warning(f"API error on {request.url.path}: {exc.code} - {exc.message}")
    return exc.to_response()


@app.exception_handler(StorefrontException)
async def storefront_exception_handler(request: Request, exc: StorefrontException):
    logger.warning(f"Domain error on {request.url.path}: {exc.code} - {exc.message}")
    return exc.to_api_error().to_response()


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    log_id = str(uuid.uuid4())[:8]
    logger.error(f"[{log_id}] Unhandled exception on {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal Error",
            "message": "An unexpected error occurred. Please try again later.",
            "code": ErrorCode.INTERNAL_ERROR,
            "details": {"log_id": log_id}
        }
    )


# ============================================
# Health
# ============================================

@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "environment": ENVIRONMENT,
        "features": feature_flags.get_all_flags(),
        "version": APP_VERSION
    }


@app.get("/api/errors/health", tags=["Health"])
async def error_handling_health():
    return get_error_summary()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "JavaMaster Storefront API",
        "version": APP_VERSION,
        "docs": "/docs" if DOCS_ENABLED else None
    }


app.include_router(router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host=HOST, port=PORT, reload=DOCS_ENABLED)
