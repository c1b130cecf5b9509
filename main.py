"""
RadioLens Diagnosis Service - FastAPI
X-ray analysis backed by a multimodal inference service
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from api import exceptions
from api.routes import diagnosis as diagnosis_routes
from core import config, errors
from utils import logging_utils


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle
    """
    logging_utils.setup_logging(config.settings)
    logger = logging_utils.get_logger(name="radiolens.main")

    logger.info("Starting RadioLens Diagnosis Service")
    if not config.settings.is_configured:
        logger.warning("API_KEY not found, analysis is disabled")

    yield

    logger.info("Shutting down RadioLens Diagnosis Service")


# Create FastAPI app
app = FastAPI(
    title=config.settings.app_name,
    version=config.settings.api_version,
    debug=config.settings.debug,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diagnosis_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Register exception handlers
app.add_exception_handler(errors.AnalysisError, exceptions.analysis_exception_handler)
app.add_exception_handler(ValidationError, exceptions.validation_exception_handler)
app.add_exception_handler(Exception, exceptions.general_exception_handler)


if __name__ == "__main__":
    uvicorn.run(app=app, host="0.0.0.0", port=5000)
