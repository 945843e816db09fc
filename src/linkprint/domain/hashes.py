"""Validated checksum value objects."""

import re
import typing as t
from collections.abc import Mapping
from typing import Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .exceptions import InvalidHashError, UnknownAlgorithmError
from .hash_algorithms import HashAlgorithm, resolve_algorithm

_HEX_PATTERN: Final = re.compile(r"^[0-9a-f]+$")
_WHITESPACE: Final = re.compile(r"\s+")


class Hash(BaseModel):
    """A checksum paired with the algorithm that produced it.

    Serializes as ``{"type": "<ALGORITHM>", "sum": "<hex digest>"}``.
    Prefer ``Hash.from_text`` over the constructor: it reports failures as
    ``InvalidHashError`` instead of pydantic's ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    algorithm: HashAlgorithm = Field(alias="type", description="Hash algorithm")
    digest: str = Field(alias="sum", description="Lowercase hexadecimal checksum")

    @field_validator("algorithm", mode="before")
    @classmethod
    def _resolve_algorithm(cls, value: t.Any) -> HashAlgorithm:
        try:
            return resolve_algorithm(value)
        except UnknownAlgorithmError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("digest", mode="before")
    @classmethod
    def _normalize_digest(cls, value: t.Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Hash digest must be a string")
        return _WHITESPACE.sub("", value).lower()

    @model_validator(mode="after")
    def _validate_digest(self) -> "Hash":
        expected_length = self.algorithm.hex_length
        if len(self.digest) != expected_length:
            raise ValueError(
                f"{self.algorithm} hash must be {expected_length} characters"
            )
        if not _HEX_PATTERN.fullmatch(self.digest):
            raise ValueError("Hash digest must be hexadecimal")
        return self

    @classmethod
    def from_text(cls, digest: str, algorithm: str) -> "Hash":
        """Create a hash from an untrusted digest and type label.

        Raises:
            InvalidHashError: If either argument is not text, the label names no
                supported algorithm, or the digest has the wrong length or
                non-hex characters.
        """
        try:
            return cls(type=algorithm, sum=digest)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidHashError(f"Invalid hash: {reason}") from exc

    @classmethod
    def from_record(cls, record: t.Any) -> "Hash":
        """Rebuild a hash from its ``{"type", "sum"}`` record."""
        if not isinstance(record, Mapping):
            raise InvalidHashError("Hash record must be a mapping")
        return cls.from_text(record.get("sum"), record.get("type"))

    @property
    def preference_weight(self) -> float:
        """Negotiation weight of the hash algorithm."""
        return self.algorithm.preference_weight

    def to_record(self) -> dict[str, str]:
        """Return the ``{"type", "sum"}`` record for this hash."""
        return self.model_dump(by_alias=True, mode="json")

    def __str__(self) -> str:
        return f"[Hash({self.algorithm}, {self.digest})]"
