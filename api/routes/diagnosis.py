"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Diagnosis routes for X-ray analysis
"""

from fastapi import APIRouter, File, Form, UploadFile

from api.dependencies.diagnosis import DiagnosisServiceDep
from api.schemas import diagnosis as diagnosis_schemas
from core import constants, errors
from utils import image_utils, logging_utils

logger = logging_utils.get_logger("radiolens.routes.diagnosis")

router = APIRouter(
    prefix="/diagnosis",
    tags=["diagnosis"],
)


@router.get("/status", response_model=diagnosis_schemas.ServiceStatusResponse)
async def get_status(
    service: DiagnosisServiceDep,
) -> diagnosis_schemas.ServiceStatusResponse:
    """
    Report whether the analysis service is configured.
    Clients should disable analysis when it is not.
    """
    configured = service.is_configured()
    return diagnosis_schemas.ServiceStatusResponse(
        configured=configured,
        message=None if configured else constants.StatusMessage.API_KEY_MISSING,
    )


@router.get("/body-parts", response_model=diagnosis_schemas.BodyPartsResponse)
async def get_body_parts() -> diagnosis_schemas.BodyPartsResponse:
    return diagnosis_schemas.BodyPartsResponse(
        body_parts=constants.BodyPart.ALL, default=constants.BodyPart.DEFAULT
    )


@router.post("", response_model=diagnosis_schemas.DiagnosisResult)
async def request_diagnosis(
    request: diagnosis_schemas.DiagnosisRequest,
    service: DiagnosisServiceDep,
) -> diagnosis_schemas.DiagnosisResult:
    """
    Analyze an X-ray image sent as a data URL.
    """
    return await service.request_diagnosis(
        encoded_image=request.image, body_part=request.bodyPart
    )


@router.post("/upload", response_model=diagnosis_schemas.DiagnosisResult)
async def upload_and_diagnose(
    service: DiagnosisServiceDep,
    file: UploadFile = File(...),
    body_part: str = Form(constants.BodyPart.DEFAULT, min_length=1),
) -> diagnosis_schemas.DiagnosisResult:
    """
    Analyze an uploaded PNG or JPEG X-ray image.
    """
    if file.content_type not in constants.ALLOWED_IMAGE_TYPES:
        logger.warning(f"Rejected upload {file.filename} of type {file.content_type}")
        raise errors.ImageReadError()

    image_bytes = await file.read()
    if not image_bytes or len(image_bytes) > service.settings.max_upload_size:
        logger.warning(f"Rejected upload {file.filename} ({len(image_bytes)} bytes)")
        raise errors.ImageReadError()

    mime = "image/jpeg" if file.content_type == "image/jpg" else file.content_type
    encoded_image = image_utils.encode_image_to_data_url(image_bytes, mime=mime)

    return await service.request_diagnosis(
        encoded_image=encoded_image, body_part=body_part
    )
