"""Cipher definition validator helpers.

Validate a cipher definition (parsed object or raw JSON text) against
`schemas/cipher.schema.json` with `jsonschema`. Both helpers return
``(valid, errors)`` where ``errors`` is a list of ``"<path>: <message>"``
strings sorted by location, suitable for showing to a user.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple

import jsonschema

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "cipher.schema.json"

_validator = None


def _get_validator() -> jsonschema.Draft7Validator:
    global _validator
    if _validator is None:
        with _SCHEMA_PATH.open("r", encoding="utf-8") as f:
            schema = json.load(f)
        jsonschema.Draft7Validator.check_schema(schema)
        _validator = jsonschema.Draft7Validator(schema)
    return _validator


def validate_cipher_obj(obj: Any) -> Tuple[bool, List[str]]:
    errors = []
    for err in sorted(
        _get_validator().iter_errors(obj), key=lambda e: list(map(str, e.absolute_path))
    ):
        loc = "/".join(str(p) for p in err.absolute_path) or "(root)"
        errors.append(f"{loc}: {err.message}")
    if errors:
        return False, errors
    return True, []


def validate_cipher_text(txt: str) -> Tuple[bool, List[str]]:
    """Validate cipher JSON text.

    Returns (valid, errors). If valid is True, errors==[].
    """
    try:
        obj = json.loads(txt)
    except json.JSONDecodeError as e:
        return False, [f"JSON parse error: {e}"]
    return validate_cipher_obj(obj)
