"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Diagnosis service orchestrating the verify -> diagnose workflow
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import AsyncOpenAI, AuthenticationError, PermissionDeniedError
from pydantic import ValidationError

from api.schemas.diagnosis import DiagnosisResult
from core import config, constants, errors
from utils import image_utils, logging_utils, openai_utils

logger = logging_utils.get_logger("radiolens.services.diagnosis")


@dataclass(frozen=True)
class StepResult:
    """Outcome of one workflow step: a value when ok, a classified error otherwise"""

    ok: bool
    value: Any = None
    error: Optional[errors.AnalysisError] = None

    @classmethod
    def success(cls, value: Any = None) -> "StepResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: errors.AnalysisError) -> "StepResult":
        return cls(ok=False, error=error)


def parse_diagnosis_result(raw: str) -> DiagnosisResult:
    """
    Parse the structured diagnosis payload returned by the model.

    A payload without a diagnoses list is a valid "no findings" result.
    Diagnoses are always returned sorted by descending probability.

    Raises:
        ValueError if the payload is not a JSON object
        ValidationError if a field is missing or out of range
    """
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Diagnosis payload is not a JSON object")

    if not isinstance(payload.get("diagnoses"), list):
        return DiagnosisResult(
            diagnoses=[], radiologistReport=constants.Defaults.NO_FINDINGS_REPORT
        )

    result = DiagnosisResult.model_validate(payload)

    # The model is asked to sort but is not trusted to
    return DiagnosisResult(
        diagnoses=sorted(
            result.diagnoses, key=lambda diagnosis: diagnosis.probability, reverse=True
        ),
        radiologistReport=result.radiologistReport,
    )


def is_invalid_credential(exc: Exception) -> bool:
    """Whether an API failure means the configured key was rejected"""
    if isinstance(exc, (AuthenticationError, PermissionDeniedError)):
        return True
    return constants.Defaults.INVALID_API_KEY_MARKER in str(exc)


class DiagnosisService:
    """
    Runs the two-phase analysis of an X-ray image.

    Phase 1 checks that the image shows the selected body part, phase 2 asks
    for the structured diagnosis. Phase 2 only runs after phase 1 succeeded.
    The service keeps no state between calls apart from the client.
    """

    def __init__(self, settings: config.Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client
        self._owns_client = client is None

    def is_configured(self) -> bool:
        return self.settings.is_configured

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = openai_utils.create_client(self.settings)
        return self._client

    async def close(self) -> None:
        """Close the client if this service created it"""
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None

    async def request_diagnosis(self, encoded_image: str, body_part: str) -> DiagnosisResult:
        """
        Analyze an encoded X-ray image of the given body part.

        Raises:
            ConfigurationError if no API key is configured
            ImageMismatchError if the image shows a different body part
            VerificationError if the body part check failed
            DiagnosisError if the diagnosis call failed
        """
        if not self.is_configured():
            logger.error("Diagnosis requested but no API key is configured")
            raise errors.ConfigurationError()

        image = self.prepare_image(encoded_image)
        if not image.ok:
            raise image.error

        verification = await self.verify(image_part=image.value, body_part=body_part)
        if not verification.ok:
            raise verification.error

        diagnosis = await self.diagnose(image_part=image.value, body_part=body_part)
        if not diagnosis.ok:
            raise diagnosis.error

        logger.info(
            f"Diagnosis completed for {body_part} ({len(diagnosis.value.diagnoses)} findings)"
        )
        return diagnosis.value

    def prepare_image(self, encoded_image: str) -> StepResult:
        """Turn a data URL into the image part sent with both calls"""
        try:
            return StepResult.success(image_utils.build_image_part(encoded_image))
        except ValueError:
            logger.error("Error during image verification step: invalid image", exc_info=True)
            return StepResult.failure(errors.VerificationError())

    async def verify(self, image_part: Dict, body_part: str) -> StepResult:
        """
        Check that the image shows the selected body part.
        The model's answer must contain the selection, so more specific
        answers ("Hand and Wrist" for "Hand") pass.
        """
        logger.info(f"Verifying image shows {body_part}")
        try:
            identified = await openai_utils.identify_body_part(
                client=self.client,
                image_part=image_part,
                model=self.settings.verification_model,
                reasoning_effort=self.settings.verification_reasoning_effort,
            )
        except Exception:
            logger.error("Error during image verification step", exc_info=True)
            return StepResult.failure(errors.VerificationError())

        if body_part.lower() not in identified.lower():
            logger.warning(f"Image mismatch: selected {body_part}, identified {identified}")
            return StepResult.failure(
                errors.ImageMismatchError(selected=body_part, identified=identified)
            )

        return StepResult.success(identified)

    async def diagnose(self, image_part: Dict, body_part: str) -> StepResult:
        """Request and parse the structured diagnosis"""
        logger.info(f"Requesting diagnosis for {body_part}")
        try:
            raw = await openai_utils.generate_diagnosis(
                client=self.client,
                body_part=body_part,
                image_part=image_part,
                model=self.settings.diagnosis_model,
            )
        except Exception as exc:
            logger.error("Error calling inference service for diagnosis", exc_info=True)
            if is_invalid_credential(exc):
                return StepResult.failure(errors.InvalidCredentialError())
            return StepResult.failure(errors.DiagnosisError())

        try:
            result = parse_diagnosis_result(raw)
        except (ValueError, ValidationError):
            logger.error("Invalid diagnosis payload from inference service", exc_info=True)
            return StepResult.failure(errors.DiagnosisError())

        return StepResult.success(result)
