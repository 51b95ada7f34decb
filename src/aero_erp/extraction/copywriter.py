#!/usr/bin/env python3
"""
AI copywriting for catalog entries using Claude.

Generates marketplace descriptions and SEO titles, and turns free-text notes
into a canonical Product via the normalizer.

Usage:
    from aero_erp.extraction.copywriter import create_client, generate_product_description

    client = create_client()
    text = generate_product_description(client, "Bluetooth earbuds", "ANC, 30h battery")

Copy generation never breaks the editor: API failures are logged and a
fallback string is returned.
"""

import json
import logging
from typing import Any, Optional

import anthropic
from anthropic import Anthropic

from aero_erp.core.config import ANTHROPIC_API_KEY, FORM_DEFAULT_METHOD, MAX_TOKENS, MODEL_ID
from aero_erp.core.normalizer import normalize_product
from aero_erp.core.schema import Product
from aero_erp.extraction.prompts import (
    DESCRIPTION_PROMPT,
    PRODUCT_CAPTURE_PROMPT,
    TITLE_PROMPT,
)

logger = logging.getLogger(__name__)

DESCRIPTION_FALLBACK = "Unable to generate a description right now. Please check the AI configuration."
TITLE_MAX_LENGTH = 100


# =============================================================================
# Client
# =============================================================================

def create_client(api_key: Optional[str] = None) -> Anthropic:
    """Build an Anthropic client from the given key or ANTHROPIC_API_KEY."""
    return Anthropic(api_key=api_key or ANTHROPIC_API_KEY)


def _complete(client: Anthropic, prompt: str, system: Optional[str] = None,
              model: str = MODEL_ID, max_tokens: int = MAX_TOKENS) -> str:
    kwargs = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
    if system:
        kwargs["system"] = system

    response = client.messages.create(**kwargs)

    parts = [
        block.text for block in response.content
        if getattr(block, "type", "text") == "text"
    ]
    return "".join(parts).strip()


# =============================================================================
# JSON Handling
# =============================================================================

def extract_json_from_response(response_text: str) -> Any:
    """
    Extract JSON from Claude's response, handling code blocks if present.

    Args:
        response_text: Raw response text from Claude

    Returns:
        Parsed JSON value

    Raises:
        ValueError: If JSON cannot be extracted/parsed
    """
    response_text = (response_text or "").strip()

    # If response starts with ```, try to extract JSON from code block
    if response_text.startswith("```"):
        lines = response_text.split("\n")
        json_lines = []
        in_json = False
        for line in lines:
            if line.startswith("```") and not in_json:
                in_json = True
                continue
            elif line.startswith("```") and in_json:
                break
            elif in_json:
                json_lines.append(line)
        response_text = "\n".join(json_lines)

    try:
        return json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON: {e}\nResponse: {response_text[:500]}...")


# =============================================================================
# Copywriting
# =============================================================================

def generate_product_description(
    client: Anthropic,
    name: str,
    features: str,
    tone: str = "Professional",
) -> str:
    """
    Write a marketplace description for a product.

    Returns:
        The generated text, or DESCRIPTION_FALLBACK if the API call fails
        or returns nothing
    """
    prompt = DESCRIPTION_PROMPT.format(name=name, features=features, tone=tone)
    try:
        text = _complete(client, prompt)
    except anthropic.APIError as e:
        logger.error(f"Description generation failed for {name!r}: {e}")
        return DESCRIPTION_FALLBACK

    return text or DESCRIPTION_FALLBACK


def optimize_product_title(client: Anthropic, name: str, keywords: str) -> str:
    """
    Rewrite a product title for search visibility.

    Returns:
        The optimized title (at most TITLE_MAX_LENGTH characters), or the
        original name if the API call fails or returns nothing
    """
    prompt = TITLE_PROMPT.format(name=name, keywords=keywords)
    try:
        title = _complete(client, prompt)
    except anthropic.APIError as e:
        logger.error(f"Title optimization failed for {name!r}: {e}")
        return name

    title = title.strip().strip('"')
    if not title:
        return name
    return title[:TITLE_MAX_LENGTH]


def suggest_product_fields(
    client: Anthropic,
    notes: str,
    default_method: str = FORM_DEFAULT_METHOD,
) -> Product:
    """
    Turn free-text notes into a canonical Product.

    The model's JSON goes through the same normalizer as any upload, so a
    sloppy answer still yields a complete record.

    Raises:
        ValueError: If the model output is not JSON
        anthropic.APIError: If the API call fails
    """
    raw_output = _complete(client, notes, system=PRODUCT_CAPTURE_PROMPT)
    data = extract_json_from_response(raw_output)

    if isinstance(data, list):
        data = data[0] if data else {}

    product = normalize_product(data, default_method=default_method)
    logger.info(f"Captured product {product.sku} from notes")
    return product
