"""
Helpers for turning model text into JSON values

Language models often wrap JSON answers in markdown code fences
(```json ... ```). The fences are removed before parsing; nothing else
about the text is repaired.
"""
import json
import re
from typing import Any, Callable, Optional

from loguru import logger

from app.core.exceptions import StructuredOutputError

FENCE_PATTERN = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove every ```json / ``` marker and trim surrounding whitespace"""
    return FENCE_PATTERN.sub("", text).strip()


def parse_json_output(
    text: str,
    validator: Optional[Callable[[Any], Any]] = None
) -> Any:
    """
    Parse model output as JSON

    Args:
        text: Raw model output, possibly fenced
        validator: Optional shape check. Receives the parsed value and
            returns the value to use; any exception it raises is reported
            as a StructuredOutputError.

    Returns:
        The parsed (and optionally validated) value

    Raises:
        StructuredOutputError: If the text is not JSON or fails validation
    """
    cleaned = strip_code_fences(text)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Model output is not valid JSON: {e}")
        raise StructuredOutputError(f"Invalid JSON in model output: {e}") from e

    if validator is None:
        return parsed

    try:
        return validator(parsed)
    except Exception as e:
        logger.warning(f"Model output failed shape validation: {e}")
        raise StructuredOutputError(f"Unexpected output shape: {e}") from e
