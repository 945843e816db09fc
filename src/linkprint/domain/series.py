"""Series numbering for batches of downloads."""

import threading
import typing as t


class CounterStore(t.Protocol):
    """Persistence seam for the series counter."""

    def get(self) -> int | None:
        """Return the stored value, or None when nothing was stored yet."""
        ...

    def set(self, value: int) -> None: ...


class InMemoryCounterStore:
    """Counter store that keeps the value for the lifetime of the process."""

    def __init__(self, value: int | None = None) -> None:
        self._value = value

    def get(self) -> int | None:
        return self._value

    def set(self, value: int) -> None:
        self._value = value


class SeriesCounter:
    """Numbering state shared by downloads queued together.

    ``increment`` hands out the current number and stores the next one,
    wrapping back to 1 once the number no longer fits in ``digits`` digits.
    """

    START = 1

    def __init__(self, store: CounterStore | None = None, digits: int = 3) -> None:
        if digits < 1:
            raise ValueError(f"Series digits must be at least 1, got {digits}")
        self._store = store if store is not None else InMemoryCounterStore()
        self._digits = digits
        self._lock = threading.Lock()

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def max_value(self) -> int:
        return 10**self._digits - 1

    @property
    def value(self) -> int:
        stored = self._store.get()
        return self.START if stored is None else stored

    def increment(self) -> int:
        """Return the current number and advance the stored one."""
        with self._lock:
            current = self.value
            following = current + 1
            if following > self.max_value:
                following = self.START
            self._store.set(following)
            return current

    def reset(self) -> None:
        with self._lock:
            self._store.set(self.START)

    def format(self, number: int) -> str:
        """Zero-pad a series number to the configured width."""
        return str(number).zfill(self._digits)
