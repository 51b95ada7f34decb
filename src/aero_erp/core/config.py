#!/usr/bin/env python3
"""
Configuration for the Aero ERP catalog toolkit.
Handles environment variable loading and validation.
"""

import os
import sys
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


# =============================================================================
# API Keys
# =============================================================================

ANTHROPIC_API_KEY: Optional[str] = os.getenv("ANTHROPIC_API_KEY")


# =============================================================================
# Normalization Defaults
# =============================================================================

# Shipping method applied when an imported record carries none.
# File uploads, pasted JSON and socket messages use the import default;
# records saved from the product form use the form default.
IMPORT_DEFAULT_METHOD: str = os.getenv("IMPORT_DEFAULT_METHOD", "Sea")
FORM_DEFAULT_METHOD: str = os.getenv("FORM_DEFAULT_METHOD", "Air")

# Prefix for synthesized product ids (e.g. IMP-3f9c2a71b0de)
ID_PREFIX: str = os.getenv("ID_PREFIX", "IMP")


# =============================================================================
# Calculator Defaults
# =============================================================================

# RMB per USD, used when a product has no exchange rate of its own
DEFAULT_EXCHANGE_RATE: float = float(os.getenv("DEFAULT_EXCHANGE_RATE", "7.2"))

# cm^3 per kg for volumetric weight (air express commonly 6000 or 5000)
VOLUMETRIC_DIVISOR: int = int(os.getenv("VOLUMETRIC_DIVISOR", "6000"))


# =============================================================================
# AI Copywriting
# =============================================================================

MODEL_ID: str = os.getenv("MODEL_ID", "claude-sonnet-4-5")
MAX_TOKENS: int = int(os.getenv("MAX_TOKENS", "1024"))


# =============================================================================
# Output Configuration
# =============================================================================

OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "output")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# =============================================================================
# Validation
# =============================================================================

def validate_config() -> None:
    """
    Validate configuration needed by the AI copywriting commands.
    Raises SystemExit if any required values are missing or invalid.
    """
    errors = []

    if not ANTHROPIC_API_KEY:
        errors.append("ANTHROPIC_API_KEY environment variable is required")

    for name, value in (
        ("IMPORT_DEFAULT_METHOD", IMPORT_DEFAULT_METHOD),
        ("FORM_DEFAULT_METHOD", FORM_DEFAULT_METHOD),
    ):
        if value not in ("Air", "Sea", "Rail"):
            errors.append(f"{name} must be one of Air, Sea, Rail (got {value!r})")

    if errors:
        print("Configuration Error(s):", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        print("\nPlease set the required environment variables and try again.", file=sys.stderr)
        sys.exit(1)


def get_config_summary() -> str:
    """
    Get a summary of the current configuration (for logging).
    Sensitive values are masked.
    """
    api_status = "Configured" if ANTHROPIC_API_KEY else "Not configured"

    return f"""
Aero ERP Configuration:
  Normalization:
    - Import default method: {IMPORT_DEFAULT_METHOD}
    - Form default method: {FORM_DEFAULT_METHOD}
    - Id prefix: {ID_PREFIX}

  Calculators:
    - Default exchange rate: {DEFAULT_EXCHANGE_RATE}
    - Volumetric divisor: {VOLUMETRIC_DIVISOR}

  AI Copywriting:
    - API Status: {api_status}
    - Model: {MODEL_ID}
    - Max Tokens: {MAX_TOKENS}

  Output:
    - Output Directory: {OUTPUT_DIR}
    - Log Level: {LOG_LEVEL}
"""


if __name__ == "__main__":
    print("Validating configuration...")
    validate_config()
    print("Configuration is valid!")
    print(get_config_summary())
