"""System prompts for AI copywriting."""

from aero_erp.extraction.prompts.marketplace import (
    DESCRIPTION_PROMPT,
    PRODUCT_CAPTURE_PROMPT,
    TITLE_PROMPT,
)

__all__ = [
    "DESCRIPTION_PROMPT",
    "PRODUCT_CAPTURE_PROMPT",
    "TITLE_PROMPT",
]
