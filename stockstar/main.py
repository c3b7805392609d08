"""
StockStar FastAPI Main Application
Entry point for the inventory voucher, balance and ledger REST API
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from stockstar.api.v1.api_router import api_router
from stockstar.core.config import settings
from stockstar.core.database import check_db_connection, init_db
from stockstar.core.exceptions import NotFoundError, ValidationError
from stockstar.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger("api")

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## StockStar Inventory API

    Single-user inventory tracking for godowns and sites.

    ### Key Features:
    - **Vouchers**: purchase inward, opening stock, transfers, usage, adjustments, damage
    - **Stock Balances**: per item and site, summed from stock movements
    - **Movement Ledger**: chronological history with running balances
    - **Master Data**: items, brands, models and sites
    """,
    docs_url=settings.DOCS_URL,
    redoc_url=settings.REDOC_URL,
    openapi_url=settings.OPENAPI_URL,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check():
    """
    Health check endpoint

    Returns system status and database connectivity
    """
    try:
        db_status = check_db_connection()

        return {
            "status": "healthy" if db_status else "degraded",
            "version": settings.APP_VERSION,
            "database": "connected" if db_status else "disconnected",
            "debug": settings.DEBUG
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unavailable")


# System information endpoint
@app.get("/info", tags=["System"])
async def system_info():
    """Application configuration and build information"""
    return {
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": "v1",
        "docs_url": settings.DOCS_URL,
        "features": [
            "Inventory Voucher Posting",
            "Stock Balances",
            "Stock Movement Ledger",
            "Master Data Management",
        ],
    }


@app.on_event("startup")
async def startup_event():
    """Create tables, upgrade legacy columns and seed transaction types"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    init_db()
    logger.info("Application startup completed successfully")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down application")


@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": "validation_error", "detail": str(exc)}
    )


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request, exc: NotFoundError):
    return JSONResponse(
        status_code=404,
        content={"error": "not_found", "detail": str(exc)}
    )


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request, exc: IntegrityError):
    logger.warning(f"Constraint violation on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={"error": "integrity_error", "detail": str(exc.orig)}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Global exception handler for unhandled errors

    Returns:
        JSON error response
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "server_error",
            "detail": str(exc) if settings.DEBUG else "An unexpected error occurred"
        }
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stockstar.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
