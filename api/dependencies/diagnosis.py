"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Dependencies providing the diagnosis service to routes
"""
from typing import Annotated, AsyncIterator

from fastapi import Depends

from api.services.diagnosis import DiagnosisService
from core import config


def get_settings() -> config.Settings:
    return config.settings


async def get_diagnosis_service(
    settings: Annotated[config.Settings, Depends(get_settings)],
) -> AsyncIterator[DiagnosisService]:
    """
    Provide a diagnosis service bound to the current settings.
    The underlying client is closed once the request is done.
    """
    service = DiagnosisService(settings=settings)
    try:
        yield service
    finally:
        await service.close()


# Type alias for cleaner usage in routes
DiagnosisServiceDep = Annotated[DiagnosisService, Depends(get_diagnosis_service)]
