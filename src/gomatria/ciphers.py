"""Cipher registry and definition loading.

Built-in definitions ship in ``gomatria/data/*.json``. User definitions
are the ``*.json`` files directly inside the config directory. Built-ins are
loaded first and user files second, each group in file name order; when
two definitions share a name the one loaded later wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from .cipher_validator import validate_cipher_obj
from .errors import CipherDefinitionError, CipherNotFound
from .models import Cipher

logger = logging.getLogger(__name__)

_BUILTIN_DIR = Path(__file__).resolve().parent / "data"

# Key spellings accepted in definition files, matched case-insensitively.
# The short forms come from the older Name/Desc/CaseSensitive/Letters layout.
_KEY_ALIASES = {
    "name": "name",
    "desc": "description",
    "description": "description",
    "casesensitive": "caseSensitive",
    "letters": "letterValues",
    "lettervalues": "letterValues",
}


class CipherSet(Mapping[str, Cipher]):
    """Read-only lookup of loaded ciphers by name."""

    def __init__(self, ciphers: Iterable[Cipher] = ()):
        table: Dict[str, Cipher] = {}
        for c in ciphers:
            if c.name in table:
                logger.debug("cipher %r overridden by a later definition", c.name)
            table[c.name] = c
        self._table = table

    def __getitem__(self, name: str) -> Cipher:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def require(self, name: str) -> Cipher:
        try:
            return self._table[name]
        except KeyError:
            raise CipherNotFound(name) from None

    def names(self) -> List[str]:
        return sorted(self._table)

    def __repr__(self) -> str:
        return f"CipherSet({self.names()!r})"


def normalize_definition(obj: Any) -> Any:
    """Rewrite known key spellings to the canonical schema keys.

    Non-object input and unknown keys are passed through untouched so the
    schema can report them.
    """
    if not isinstance(obj, dict):
        return obj
    out: Dict[str, Any] = {}
    for key, value in obj.items():
        canonical = _KEY_ALIASES.get(key.lower(), key) if isinstance(key, str) else key
        out[canonical] = value
    return out


def cipher_from_definition(obj: Any, source: str = "<definition>") -> Cipher:
    obj = normalize_definition(obj)
    valid, errors = validate_cipher_obj(obj)
    if not valid:
        raise CipherDefinitionError(source, errors)
    return Cipher(
        name=obj["name"],
        description=obj.get("description", ""),
        case_sensitive=obj.get("caseSensitive", False),
        letters={k: int(v) for k, v in obj["letterValues"].items()},
    )


def read_cipher_file(path: Path) -> Cipher:
    path = Path(path)
    try:
        txt = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CipherDefinitionError(str(path), [f"read error: {e}"]) from e
    try:
        obj = json.loads(txt)
    except json.JSONDecodeError as e:
        raise CipherDefinitionError(str(path), [f"JSON parse error: {e}"]) from e
    return cipher_from_definition(obj, str(path))


def builtin_cipher_files() -> List[Path]:
    return sorted(_BUILTIN_DIR.glob("*.json"))


def user_cipher_files(config_dir: Optional[Path]) -> List[Path]:
    if config_dir is None:
        return []
    d = Path(config_dir)
    if not d.is_dir():
        return []
    # settings.json lives next to the user ciphers and is not one
    return sorted(
        p for p in d.iterdir()
        if p.is_file() and p.suffix == ".json" and p.name != "settings.json"
    )


def load_ciphers(config_dir: Optional[Path] = None) -> CipherSet:
    """Load built-in ciphers, then user ciphers from ``config_dir``.

    An invalid definition raises CipherDefinitionError; nothing is skipped
    silently.
    """
    loaded: List[Cipher] = []
    for p in builtin_cipher_files():
        loaded.append(read_cipher_file(p))
    for p in user_cipher_files(config_dir):
        logger.debug("loading user cipher %s", p)
        loaded.append(read_cipher_file(p))
    return CipherSet(loaded)
