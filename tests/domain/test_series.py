"""Tests for series numbering."""

import pytest

from linkprint.domain.series import InMemoryCounterStore, SeriesCounter


class TestSeriesCounter:
    """Read / increment / reset contract."""

    def test_starts_at_one(self):
        assert SeriesCounter().value == 1

    def test_increment_returns_current_value(self):
        counter = SeriesCounter()
        assert counter.increment() == 1
        assert counter.increment() == 2
        assert counter.value == 3

    def test_wraps_after_max_value(self):
        """Numbers wrap back to 1 once they outgrow the digits."""
        store = InMemoryCounterStore(99)
        counter = SeriesCounter(store, digits=2)
        assert counter.max_value == 99
        assert counter.increment() == 99
        assert counter.value == 1
        assert store.get() == 1

    def test_reset(self):
        counter = SeriesCounter(InMemoryCounterStore(42))
        counter.reset()
        assert counter.value == 1

    def test_uses_injected_store(self, mocker):
        store = mocker.Mock()
        store.get.return_value = 7
        counter = SeriesCounter(store)

        assert counter.increment() == 7
        store.set.assert_called_once_with(8)

    def test_rejects_zero_digits(self):
        with pytest.raises(ValueError):
            SeriesCounter(digits=0)

    def test_format_pads_to_digits(self):
        assert SeriesCounter(digits=3).format(7) == "007"
