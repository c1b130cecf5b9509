"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Classified errors raised by the diagnosis workflow
"""

from core import constants


class AnalysisError(Exception):
    """Base class for failures surfaced to the user"""

    code = "analysis_error"
    default_message = constants.ErrorMessage.INTERNAL

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(AnalysisError):
    """No credential configured for the inference service"""

    code = constants.ErrorCode.NOT_CONFIGURED
    default_message = constants.ErrorMessage.NOT_CONFIGURED


class ImageMismatchError(AnalysisError):
    """The image does not show the body part the user selected"""

    code = constants.ErrorCode.IMAGE_MISMATCH

    def __init__(self, selected: str, identified: str):
        self.selected = selected
        self.identified = identified
        super().__init__(
            constants.ErrorMessage.IMAGE_MISMATCH.format(
                selected=selected, identified=identified
            )
        )


class VerificationError(AnalysisError):
    """The body part verification call failed"""

    code = constants.ErrorCode.VERIFICATION_FAILED
    default_message = constants.ErrorMessage.VERIFICATION_FAILED


class DiagnosisError(AnalysisError):
    """The diagnosis call failed or returned an unusable payload"""

    code = constants.ErrorCode.DIAGNOSIS_FAILED
    default_message = constants.ErrorMessage.DIAGNOSIS_FAILED


class InvalidCredentialError(DiagnosisError):
    code = constants.ErrorCode.INVALID_API_KEY
    default_message = constants.ErrorMessage.INVALID_API_KEY


class ImageReadError(AnalysisError):
    code = constants.ErrorCode.IMAGE_READ_FAILED
    default_message = constants.ErrorMessage.IMAGE_READ_FAILED
