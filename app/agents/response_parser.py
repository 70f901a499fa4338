from __future__ import annotations

"""
Response Parser
---------------
Recovers a JSON object from free-text model output. Models wrap JSON in
markdown fences, use typographic quotes, or add prose around it even when
told not to, so parsing falls back through these strategies in order:

1. Interior of the first ```/```json fenced block, else the whole text.
2. Strict parse of that candidate.
3. Same candidate with curly quotes straightened.
4. Greedy span from the first `{` to the last `}` of the raw text.

The first strategy that yields a JSON object wins. Order matters: text with
both a fenced block and stray braces outside it resolves to the block.
"""

import json
import logging
import math
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
BRACE_SPAN_RE = re.compile(r"\{[\s\S]*\}")

_TYPOGRAPHIC_QUOTES = str.maketrans({
    "\u201c": '"',
    "\u201d": '"',
    "\u2018": "'",
    "\u2019": "'",
})


def extract_candidate(text: str) -> str:
    """Return the interior of the first fenced code block, or the text itself."""
    match = FENCED_BLOCK_RE.search(text)
    return match.group(1) if match else text


def normalize_quotes(text: str) -> str:
    return text.translate(_TYPOGRAPHIC_QUOTES)


def find_brace_span(text: str) -> Optional[str]:
    match = BRACE_SPAN_RE.search(text)
    return match.group(0) if match else None


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {token}")


def _parse_float(token: str) -> float:
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"number out of range {token}")
    return value


def _loads_object(candidate: Optional[str]) -> Dict[str, Any]:
    if candidate is None:
        raise ValueError("no JSON object span found")
    data = json.loads(candidate, parse_constant=_reject_constant, parse_float=_parse_float)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def parse_workout_response(text: str) -> Optional[Dict[str, Any]]:
    """Parse model output into a dict, or return None if every strategy fails.

    Never raises for malformed input.
    """
    candidate = extract_candidate(text)
    strategies: List[Tuple[str, Callable[[], Optional[str]]]] = [
        ("direct", lambda: candidate),
        ("normalized_quotes", lambda: normalize_quotes(candidate)),
        ("brace_span", lambda: find_brace_span(text)),
    ]

    errors: List[str] = []
    for label, get_candidate in strategies:
        try:
            return _loads_object(get_candidate())
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError
            logger.debug("Parse strategy %s failed: %s", label, e)
            errors.append(f"{label}: {e}")

    logger.error("Could not recover a JSON object from model output (%s)", "; ".join(errors))
    logger.error("Raw response: %s", text)
    return None
