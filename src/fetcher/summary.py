"""
Helpers shared by every backend for turning a raw payload into a summary.
"""

from __future__ import annotations

import json
from typing import Any

from configs.constants import Constants
from src.fetcher.errors import MalformedResponseError


def load_payload(raw_response: str) -> dict[str, Any]:
    """Decode *raw_response* as a JSON object.

    Raises
    ------
    MalformedResponseError
        If the text is not JSON or the top-level value is not an object.
    """
    try:
        payload = json.loads(raw_response)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    return payload


def require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass but never a valid id or stat
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError(f"Field '{field_name}' must be an integer, got {value!r}")
    return value


def format_summary(name: str, pokemon_id: int, hp: int) -> str:
    """Render the one-line summary, e.g. ``"Pikachu (#25) has 35 HP."``."""
    if not isinstance(name, str) or not name:
        raise MalformedResponseError(f"Field 'name' must be a non-empty string, got {name!r}")
    display_name = name[0].upper() + name[1:]
    return Constants.SUMMARY_TEMPLATE.format(
        name=display_name,
        pokemon_id=require_int(pokemon_id, "id"),
        hp=require_int(hp, "hp"),
    )
