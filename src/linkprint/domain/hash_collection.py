"""Full and partial checksums for a single download."""

import threading
import typing as t
from collections.abc import Mapping, Sequence

from .exceptions import InvalidHashCollectionError, InvalidHashError
from .hashes import Hash

if t.TYPE_CHECKING:
    from ..urls.canonical import CanonicalURL


class HashCollection:
    """Collection of hashes (checksums) about a single download.

    Holds one hash covering the whole download plus optional partial hashes,
    one per chunk of ``par_length`` bytes, in chunk order. Partials are
    append-only; every append swaps in a new immutable snapshot under a lock,
    so ``to_record`` never lags behind ``partials``.

    Serializes as ``{"full": ..., "parLength": ..., "partials": [...]}``.
    """

    def __init__(self, full: Hash, par_length: int = 0) -> None:
        if not isinstance(full, Hash):
            raise InvalidHashCollectionError("Cannot init empty HashCollection")
        if (
            not isinstance(par_length, int)
            or isinstance(par_length, bool)
            or par_length < 0
        ):
            raise InvalidHashCollectionError(
                f"Partial length must be a non-negative integer, got {par_length!r}"
            )
        self._lock = threading.Lock()
        self._full = full
        self._par_length = par_length
        self._snapshot: tuple[Hash, int, tuple[Hash, ...]] = (full, par_length, ())

    @classmethod
    def load(cls, record: t.Any) -> "HashCollection":
        """Load a HashCollection from a serialized record.

        The full hash is rebuilt first, then each partial in order. Any
        malformed part fails the whole load.

        Raises:
            InvalidHashCollectionError: If the record or any hash in it is
                malformed.
        """
        if not isinstance(record, Mapping):
            raise InvalidHashCollectionError("HashCollection record must be a mapping")
        try:
            full = Hash.from_record(record.get("full"))
        except InvalidHashError as exc:
            raise InvalidHashCollectionError(f"Invalid full hash: {exc}") from exc

        collection = cls(full, par_length=record.get("parLength") or 0)

        partials = record.get("partials") or ()
        if not isinstance(partials, Sequence) or isinstance(partials, (str, bytes)):
            raise InvalidHashCollectionError("Partials must be a sequence of hashes")
        for index, entry in enumerate(partials):
            try:
                collection.add(Hash.from_record(entry))
            except InvalidHashError as exc:
                raise InvalidHashCollectionError(
                    f"Invalid partial hash #{index}: {exc}"
                ) from exc
        return collection

    @classmethod
    def from_url(cls, url: "CanonicalURL") -> t.Optional["HashCollection"]:
        """Seed a collection from a URL's link fingerprint, if it has one."""
        if url.fingerprint is None:
            return None
        return cls(url.fingerprint)

    @property
    def full(self) -> Hash:
        return self._full

    @property
    def par_length(self) -> int:
        return self._par_length

    @property
    def partials(self) -> tuple[Hash, ...]:
        """Partial hashes in chunk order."""
        return self._snapshot[2]

    @property
    def has_partials(self) -> bool:
        return bool(self._snapshot[2])

    def add(self, partial: Hash) -> None:
        """Append the hash of the next chunk.

        Raises:
            InvalidHashError: If ``partial`` is not a Hash.
        """
        if not isinstance(partial, Hash):
            raise InvalidHashError("Must supply hash")
        with self._lock:
            full, par_length, partials = self._snapshot
            self._snapshot = (full, par_length, partials + (partial,))

    def to_record(self) -> dict[str, t.Any]:
        """Return the serialized form of the current snapshot."""
        full, par_length, partials = self._snapshot
        return {
            "full": full.to_record(),
            "parLength": par_length,
            "partials": [partial.to_record() for partial in partials],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashCollection):
            return NotImplemented
        return self._snapshot == other._snapshot

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._snapshot[2])

    def __repr__(self) -> str:
        return f"[HashCollection({self.to_record()})]"
