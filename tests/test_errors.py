"""Tests for autocommit.runner.errors module."""

from unittest.mock import patch

import pytest

from autocommit.runner.errors import DeferredError, ErrorAggregator, MultipleRuntimeErrors


class TestErrorAggregator:
    """Test ErrorAggregator record/resolve."""

    def test_resolve_with_no_errors(self):
        aggregator = ErrorAggregator()
        aggregator.resolve()
        assert len(aggregator) == 0

    def test_single_error_is_raised_as_is(self):
        aggregator = ErrorAggregator()
        error = DeferredError("git add x", "Add command did not match any file: git add x")
        aggregator.record(error)

        with pytest.raises(DeferredError) as exc_info:
            aggregator.resolve()
        assert exc_info.value is error

    @patch("autocommit.runner.errors.actions.error")
    def test_multiple_errors_are_combined(self, mock_error):
        aggregator = ErrorAggregator()
        first = DeferredError("git add x", "first")
        second = DeferredError("git rm y", "second")
        aggregator.record(first)
        aggregator.record(second)

        with pytest.raises(MultipleRuntimeErrors) as exc_info:
            aggregator.resolve()

        assert exc_info.value.errors == [first, second]
        assert str(exc_info.value) == "There have been multiple runtime errors."
        assert [c.args[0] for c in mock_error.call_args_list] == ["first", "second"]

    def test_errors_is_a_copy(self):
        aggregator = ErrorAggregator()
        aggregator.record(DeferredError("op", "msg"))
        aggregator.errors.clear()
        assert len(aggregator) == 1
