"""Core data model.

Cipher: immutable, named letter-to-integer mapping plus its case policy.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Cipher:
    name: str
    description: str
    case_sensitive: bool
    letters: Mapping[str, int] = field(default_factory=dict, hash=False)  # single character -> value

    def __post_init__(self):
        # freeze the mapping so a loaded cipher cannot change during a run
        object.__setattr__(self, "letters", MappingProxyType(dict(self.letters)))
