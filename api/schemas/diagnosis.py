"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Diagnosis schemas for X-ray analysis
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import image_utils


class AttentionArea(BaseModel):
    """Circular region of interest in percentage-of-image units."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)
    radius: float = Field(..., ge=0.0, le=100.0)


class Diagnosis(BaseModel):
    """A potential condition with its probability and attention area."""

    model_config = ConfigDict(frozen=True)

    condition: str = Field(..., min_length=1)
    probability: float = Field(..., ge=0.0, le=1.0)
    attentionArea: AttentionArea


class DiagnosisResult(BaseModel):
    """Structured result of one analysis, diagnoses ranked by probability."""

    model_config = ConfigDict(frozen=True)

    diagnoses: List[Diagnosis]
    radiologistReport: str


class DiagnosisRequest(BaseModel):
    """Request to analyze an encoded X-ray image"""

    image: str = Field(..., description="Image as data:<mime>;base64,<payload>")
    bodyPart: str = Field(..., min_length=1, description="Body part shown in the image")

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str) -> str:
        image_utils.parse_data_url(value)
        return value


class ServiceStatusResponse(BaseModel):
    """Whether the analysis service can be used"""

    configured: bool
    message: Optional[str] = None


class BodyPartsResponse(BaseModel):
    body_parts: List[str]
    default: str
