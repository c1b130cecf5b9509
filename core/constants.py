"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Application constants for the RadioLens API
"""


# Body parts offered to the user. The orchestrator accepts any label.
class BodyPart:
    CHEST = "Chest"
    SKULL = "Skull"
    HAND = "Hand"
    FOOT = "Foot"
    SPINE = "Spine"
    ABDOMEN = "Abdomen"
    PELVIS = "Pelvis"

    DEFAULT = CHEST

    ALL = [CHEST, SKULL, HAND, FOOT, SPINE, ABDOMEN, PELVIS]


# User-facing error messages
class ErrorMessage:
    NOT_CONFIGURED = (
        "The analysis service is not configured: no API key has been provided."
    )
    IMAGE_MISMATCH = (
        "Image Mismatch: You selected {selected}, but the AI identified the image "
        "as a {identified}. Please select the correct body part or upload a "
        "different image."
    )
    VERIFICATION_FAILED = (
        "The AI model failed to verify the image type. Please try again."
    )
    DIAGNOSIS_FAILED = (
        "The AI model failed to process the image. "
        "Please try again or use a different image."
    )
    INVALID_API_KEY = (
        "The provided API key is invalid. Please check your configuration."
    )
    IMAGE_READ_FAILED = "Failed to read the image file."
    INTERNAL = "An internal server error occurred"


# Machine-readable error codes returned alongside messages
class ErrorCode:
    NOT_CONFIGURED = "not_configured"
    IMAGE_MISMATCH = "image_mismatch"
    VERIFICATION_FAILED = "verification_failed"
    DIAGNOSIS_FAILED = "diagnosis_failed"
    INVALID_API_KEY = "invalid_api_key"
    IMAGE_READ_FAILED = "image_read_failed"


# Status messages
class StatusMessage:
    API_KEY_MISSING = (
        "An API key has not been provided. "
        "The analysis functionality will be disabled."
    )


# Default values
class Defaults:
    NO_FINDINGS_REPORT = (
        "No definitive findings could be established from the provided image."
    )
    MAX_DIAGNOSES = 4

    # Marker the inference service puts in messages for rejected keys
    INVALID_API_KEY_MARKER = "API key not valid"


# Accepted upload types
ALLOWED_IMAGE_TYPES = ["image/png", "image/jpeg", "image/jpg"]
