"""Tests for autocommit.lib.validate module."""

import pytest

from autocommit.lib.config import DEFAULT_INPUTS
from autocommit.lib.validate import ValidationError, validate_inputs


class TestValidateInputs:
    """Test validate_inputs messages."""

    def test_defaults_are_valid(self):
        validate_inputs(dict(DEFAULT_INPUTS))

    def test_names_the_input(self):
        inputs = dict(DEFAULT_INPUTS, branch_mode="sometimes")
        with pytest.raises(ValidationError) as exc_info:
            validate_inputs(inputs)
        assert str(exc_info.value).startswith("'branch_mode' input: 'sometimes' is not one of")

    def test_reports_every_problem(self):
        inputs = dict(DEFAULT_INPUTS, branch_mode="sometimes", pathspec_error_handling="exit")
        with pytest.raises(ValidationError) as exc_info:
            validate_inputs(inputs)
        problems = exc_info.value.problems
        assert len(problems) == 2
        assert problems[0].startswith("'branch_mode' input:")
        assert problems[1].startswith("'pathspec_error_handling' input:")

    def test_missing_required_input(self):
        inputs = dict(DEFAULT_INPUTS)
        del inputs["default_author"]
        with pytest.raises(ValidationError) as exc_info:
            validate_inputs(inputs)
        assert "'default_author' is a required property" in str(exc_info.value)
