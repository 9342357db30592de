"""
Storefront Application

Backend for a small demo shop: product catalog, registration and login,
and a per-account cart persisted in a JSON document.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are first read
load_dotenv()

from .core.config import get_settings
from .core.error_handlers import register_error_handlers
from .routes import products_router, auth_router, cart_router, debug_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(f"Database: {settings.db_path}")
    logger.info(f"Catalog: {settings.get_products_path()}")
    if settings.debug:
        logger.warning("Debug mode on, /api/debug/db exposes the whole database")
    yield
    logger.info("Storefront shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Demo storefront with a JSON-file backed cart",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API routers
app.include_router(products_router)
app.include_router(auth_router)
app.include_router(cart_router)
app.include_router(debug_router)


@app.get("/")
async def home():
    return {
        "message": "Storefront API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "register": "/api/register",
            "login": "/api/login",
            "cart": "/api/cart",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
