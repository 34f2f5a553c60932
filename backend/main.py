import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from solesociety.core.config import settings
from solesociety.core.database import async_session_maker, init_db
from solesociety.core.logging_config import configure_logging
from solesociety.api.routes import api_router
from solesociety.services.kicks_client import KicksClient, UpstreamError
from solesociety.services.product_lookup import ProductNotFoundError
from solesociety.services.users import UserRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    if not settings.KICKS_API_KEY:
        logger.warning("KICKS_API_KEY is not set; upstream calls will be rejected")

    await init_db()
    if settings.SEED_DEMO_USER:
        async with async_session_maker() as session:
            await UserRepository(session).seed_demo_user()

    owns_client = getattr(app.state, "kicks_client", None) is None
    if owns_client:
        app.state.kicks_client = KicksClient()
    try:
        yield
    finally:
        if owns_client:
            await app.state.kicks_client.aclose()
            app.state.kicks_client = None


app = FastAPI(
    title=settings.APP_NAME,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    # Pass the upstream status and body through when there was a response
    if exc.status_code is not None:
        body = exc.body if exc.body is not None else {"error": exc.message}
        return JSONResponse(status_code=exc.status_code, content=body)
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(ProductNotFoundError)
async def not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(status_code=404, content={"error": "Product not found"})


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/api/docs",
    }
