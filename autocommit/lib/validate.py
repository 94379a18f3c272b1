"""
Input validation against inputs.schema.json.

Every problem found is reported at once, phrased in terms of the input
it concerns, so a misconfigured workflow can be fixed in one pass.
"""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "inputs.schema.json"


class ValidationError(Exception):
    """One or more inputs do not match the schema."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


@lru_cache(maxsize=None)
def load_schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text())


def _describe(error: jsonschema.ValidationError) -> str:
    if error.absolute_path:
        name = str(error.absolute_path[0])
        return f"'{name}' input: {error.message}"
    return f"inputs: {error.message}"


def validate_inputs(inputs: dict) -> None:
    """
    Check raw inputs against the schema.

    Raises:
        ValidationError: listing every mismatch, ordered by input name
    """
    validator = jsonschema.Draft7Validator(load_schema())
    errors = sorted(validator.iter_errors(inputs), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        raise ValidationError([_describe(e) for e in errors])
