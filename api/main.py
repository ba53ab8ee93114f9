# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict
from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import api_logger as logger
from api.endpoints.plans import router as plans_router

# Define lifespan context manager
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Run on application startup.")
    Config.validate()

    yield  # This is where the application runs

    logger.info("Application shutting down.")

logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="Panel Planner API",
    description="""
    # Panel Planner API

    Allocates prefabricated wall panels to walls taken from a floor plan.

    ## Features

    - Wishlist plans: any catalog width may be used without limit
    - Inventory plans: placements are bounded by on-hand counts
    - Catalog CSV parsing

    ## Authentication

    All planning endpoints require an API key to be provided in the `X-API-Key` header.

    ## Workflow

    1. Parse a catalog CSV with `POST /plans/catalog` (optional)
    2. Submit walls and catalog entries to `POST /plans`
    3. Each wall comes back with its panel chains
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Plans",
            "description": "Panel allocation for walls"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "Panel Planner API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.info("Health check requested")
    return {"status": "healthy", "message": "Panel Planner API is running"}

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    plans_router,
    prefix="/plans",
    tags=["Plans"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included plans router with prefix /plans")

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
