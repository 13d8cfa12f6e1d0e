"""Version selectors used when addressing workflow definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import SerializationError


class VersionKind(Enum):
    LATEST = "Latest"
    PUBLISHED = "Published"
    ALL = "All"
    SPECIFIC = "Specific"


RESERVED_TOKENS = {
    VersionKind.LATEST.value: VersionKind.LATEST,
    VersionKind.PUBLISHED.value: VersionKind.PUBLISHED,
    VersionKind.ALL.value: VersionKind.ALL,
}


@dataclass(frozen=True)
class VersionOptions:
    """Reference to a definition version: latest, published, all, or a number.

    On the wire a selector is a compact token: ``"Latest"``, ``"Published"``,
    ``"All"`` or the decimal version number, e.g. ``"3"``.
    """

    kind: VersionKind
    version: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is VersionKind.SPECIFIC:
            if self.version is None or self.version < 0:
                raise ValueError("a specific version must be a non-negative integer")
        elif self.version is not None:
            raise ValueError(f"{self.kind.value} does not take a version number")

    @classmethod
    def latest(cls) -> "VersionOptions":
        return cls(VersionKind.LATEST)

    @classmethod
    def published(cls) -> "VersionOptions":
        return cls(VersionKind.PUBLISHED)

    @classmethod
    def all(cls) -> "VersionOptions":
        return cls(VersionKind.ALL)

    @classmethod
    def specific(cls, version: int) -> "VersionOptions":
        return cls(VersionKind.SPECIFIC, version)

    def to_token(self) -> str:
        if self.kind is VersionKind.SPECIFIC:
            return str(self.version)
        return self.kind.value

    @classmethod
    def from_token(cls, token: str) -> "VersionOptions":
        kind = RESERVED_TOKENS.get(token)
        if kind is not None:
            return cls(kind)
        # ASCII digits only: no sign, no whitespace.
        if not (token.isascii() and token.isdigit()):
            raise SerializationError(f"unrecognised version options token: {token!r}")
        return cls.specific(int(token))

    def __str__(self) -> str:
        return self.to_token()


__all__ = ["VersionKind", "VersionOptions"]
