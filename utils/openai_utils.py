"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

OpenAI-compatible client utilities for X-ray analysis
"""

from typing import Dict, Optional

import httpx
from openai import AsyncOpenAI

from core import config, constants

VERIFICATION_PROMPT = (
    "Briefly identify the primary human body part shown in this X-ray. "
    'Respond with only the name of the body part (e.g., "Chest", "Skull", "Hand").'
)

DIAGNOSIS_PROMPT = """
You are an expert radiology assistant AI. Analyze this X-ray of a human {body_part}.
Based on the image, provide a list of up to {max_diagnoses} potential medical conditions, their probabilities, and the key area of attention for each diagnosis.
Sort the diagnoses in descending order of probability.
Also, provide a detailed "radiologistReport". This report should be a narrative summary (2-3 paragraphs) of your findings, written in a professional, clinical tone. It should mention the potential conditions and refer to the areas of interest you identified.
Do not add any introductory text or explanation outside of the requested JSON format.
"""

# Schema for the structured diagnosis response
DIAGNOSIS_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "diagnoses": {
            "type": "array",
            "description": "A list of potential diagnoses based on the X-ray.",
            "items": {
                "type": "object",
                "properties": {
                    "condition": {
                        "type": "string",
                        "description": "The name of the medical condition.",
                    },
                    "probability": {
                        "type": "number",
                        "description": "The probability of this condition, from 0.0 to 1.0.",
                    },
                    "attentionArea": {
                        "type": "object",
                        "description": "The area of the image the model focused on for this diagnosis.",
                        "properties": {
                            "x": {
                                "type": "number",
                                "description": "The x-coordinate of the center of the attention circle, as a percentage of image width (0-100).",
                            },
                            "y": {
                                "type": "number",
                                "description": "The y-coordinate of the center of the attention circle, as a percentage of image height (0-100).",
                            },
                            "radius": {
                                "type": "number",
                                "description": "The radius of the attention circle, as a percentage of image width (0-100).",
                            },
                        },
                        "required": ["x", "y", "radius"],
                    },
                },
                "required": ["condition", "probability", "attentionArea"],
            },
        },
        "radiologistReport": {
            "type": "string",
            "description": (
                "A detailed narrative report in the style of a radiologist, summarizing "
                "the findings, potential conditions, and reasoning based on the attention "
                "areas. Should be 2-3 paragraphs long."
            ),
        },
    },
    "required": ["diagnoses", "radiologistReport"],
}


def create_client(
    settings: config.Settings, http_client: Optional[httpx.AsyncClient] = None
) -> AsyncOpenAI:
    """
    Create a client for the inference service.
    Retries are disabled, a failed call ends the analysis.
    """
    return AsyncOpenAI(
        api_key=settings.api_key,
        base_url=settings.inference_base_url,
        max_retries=0,
        http_client=http_client,
    )


def _message_text(completion) -> str:
    """Extract the text of the first choice, failing on empty responses"""
    if not completion.choices:
        raise ValueError("Inference service returned no choices")
    content = completion.choices[0].message.content
    if not content:
        raise ValueError("Inference service returned an empty message")
    return content


async def identify_body_part(
    client: AsyncOpenAI,
    image_part: Dict,
    model: str,
    reasoning_effort: Optional[str] = None,
) -> str:
    """
    Ask the model which body part the X-ray shows.
    Returns the trimmed free-text answer.
    """
    options = {}
    if reasoning_effort:
        options["reasoning_effort"] = reasoning_effort

    completion = await client.chat.completions.create(
        model=model,
        messages=[
            {
                "role": "user",
                "content": [{"type": "text", "text": VERIFICATION_PROMPT}, image_part],
            }
        ],
        **options,
    )
    return _message_text(completion).strip()


async def generate_diagnosis(
    client: AsyncOpenAI, body_part: str, image_part: Dict, model: str
) -> str:
    """
    Ask the model for a structured diagnosis of the X-ray.
    Returns the raw JSON text, parsing is left to the caller.
    """
    prompt = DIAGNOSIS_PROMPT.format(
        body_part=body_part, max_diagnoses=constants.Defaults.MAX_DIAGNOSES
    )

    completion = await client.chat.completions.create(
        model=model,
        messages=[
            {
                "role": "user",
                "content": [{"type": "text", "text": prompt}, image_part],
            }
        ],
        response_format={
            "type": "json_schema",
            "json_schema": {
                "name": "diagnosis_result",
                "schema": DIAGNOSIS_RESPONSE_SCHEMA,
            },
        },
    )
    return _message_text(completion)
