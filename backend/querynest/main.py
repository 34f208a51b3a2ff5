"""
Query Nest - Main FastAPI Application

REST backend for a crowd-sourced product query site:
- Product queries with owner-scoped listings
- Recommendations that keep a per-query recommendation count
- Favorites (bookmarked query snapshots)
- Cookie-carried JWT sessions
- Structured Logging
- Prometheus Metrics
"""

from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import settings
from .api import api_router
from .exceptions import NotFoundError
from .services.reconciliation import reconcile_recommendation_counts
from .utils.database import create_db_engine, create_session_factory, get_db, init_db
from .utils.logging import (
    setup_logging,
    get_logger,
    configure_uvicorn_logging,
    bind_request_context,
    clear_request_context
)
from .utils.metrics import setup_metrics

# Setup structured logging
setup_logging(log_level=settings.LOG_LEVEL)
configure_uvicorn_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""

    # Startup
    logger.info("Starting Query Nest", version=settings.VERSION, environment=settings.ENVIRONMENT)

    engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URL)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    logger.info("Initializing database")
    init_db(engine)

    if settings.RECONCILE_ON_STARTUP:
        logger.info("Reconciling recommendation counts")
        db = app.state.session_factory()
        try:
            reconcile_recommendation_counts(db)
        finally:
            db.close()

    logger.info("Query Nest started successfully", port=settings.PORT)

    yield

    # Shutdown
    logger.info("Shutting down Query Nest")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    # Query Nest API

    Users post queries about products, other users recommend alternatives,
    and anyone can bookmark a query as a favorite.

    ## Sessions

    `POST /jwt` signs the posted identity and stores it in an HTTP-only
    `token` cookie. Protected routes read the cookie; `/logout` clears it.

    ## Recommendation counts

    Creating or deleting a recommendation adjusts `recommendationCount` on
    its parent query in the same transaction.
    """,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Session credential issue and revoke"},
        {"name": "queries", "description": "Product queries"},
        {"name": "recommendations", "description": "Recommendations against queries"},
        {"name": "favorites", "description": "Bookmarked queries"},
    ]
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error", method=request.method, url=str(request.url), error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"}
    )


# Setup Prometheus metrics
setup_metrics(app)

# Include routers
app.include_router(api_router)


# Middleware for logging requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests under a per-request id"""
    request_id = bind_request_context(request.method, request.url.path)
    logger.info("Request received", client=request.client.host if request.client else None)

    try:
        response = await call_next(request)
        logger.info("Request completed", status_code=response.status_code)
    finally:
        clear_request_context()

    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/", tags=["root"], response_class=PlainTextResponse)
def root():
    """Liveness endpoint"""
    return "Query Nest is running"


@app.get("/health", tags=["root"], status_code=status.HTTP_200_OK)
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint"""

    db_healthy = True
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed", error=str(e))
        db_healthy = False

    return {
        "status": "healthy" if db_healthy else "degraded",
        "database": "connected" if db_healthy else "disconnected",
        "version": settings.VERSION
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "querynest.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True
    )
