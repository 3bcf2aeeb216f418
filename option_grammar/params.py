from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Param:
    """One flattened request parameter."""

    name: str
    value: str

    def as_tuple(self) -> Tuple[str, str]:
        return (self.name, self.value)

    def __str__(self) -> str:
        return f"{self.name}={self.value}"
