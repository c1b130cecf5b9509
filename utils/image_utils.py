"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Data URI helpers for uploaded X-ray images
"""

import base64
from typing import Dict, Tuple


def encode_image_to_data_url(image_bytes: bytes, mime: str = "image/png") -> str:
    """
    Return a data URL (base64) string for the given image bytes.
    Example: data:image/png;base64,AAA...
    """
    b64 = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime};base64,{b64}"


def parse_data_url(data_url: str) -> Tuple[str, str]:
    """
    Split a data URL into its MIME type and base64 payload.

    Raises:
        ValueError if the string is not a base64 data URL with a MIME type
    """
    if not isinstance(data_url, str) or not data_url.startswith("data:"):
        raise ValueError("Image is not a data URL")

    header, sep, payload = data_url.partition(",")
    if not sep or not payload:
        raise ValueError("Image data URL has no payload")

    mime_type, _, encoding = header[len("data:"):].partition(";")
    if not mime_type or encoding != "base64":
        raise ValueError("Image data URL must declare a MIME type and base64 encoding")

    return mime_type, payload


def build_image_part(data_url: str) -> Dict:
    """
    Build the multimodal message part for an image data URL.
    The URL is validated and re-assembled so the service only sees a clean payload.
    """
    mime_type, payload = parse_data_url(data_url)
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{mime_type};base64,{payload}"},
    }
