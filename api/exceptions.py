"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

API exception handlers for global error handling
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core import constants, errors
from utils import logging_utils

logger = logging_utils.get_logger("radiolens.api.exceptions")

# Most specific classes first
ERROR_STATUS_CODES = [
    (errors.InvalidCredentialError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (errors.ConfigurationError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (errors.ImageMismatchError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (errors.ImageReadError, status.HTTP_400_BAD_REQUEST),
    (errors.VerificationError, status.HTTP_502_BAD_GATEWAY),
    (errors.DiagnosisError, status.HTTP_502_BAD_GATEWAY),
]


def status_code_for(exc: errors.AnalysisError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def analysis_exception_handler(request: Request, exc: errors.AnalysisError):
    """Handle classified analysis errors"""
    logger.warning(
        f"Analysis failed at {request.method} {request.url.path}: {exc.code}"
    )
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, errors.ImageMismatchError):
        content["selected"] = exc.selected
        content["identified"] = exc.identified
    return JSONResponse(status_code=status_code_for(exc), content=content)


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error at {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.error(
        f"Server error at {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": constants.ErrorMessage.INTERNAL},
    )
