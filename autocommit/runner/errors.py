"""
Deferred run errors.

Failures that should not stop the pipeline but must fail the run are
recorded in the run's ErrorAggregator and resolved once, at the end.
"""

import logging

from autocommit.lib import actions

logger = logging.getLogger(__name__)


class DeferredError(Exception):
    """A failure recorded during the run and raised when the run ends."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(message)


class MultipleRuntimeErrors(Exception):
    """More than one deferred error was recorded."""

    def __init__(self, errors: list[DeferredError]):
        self.errors = list(errors)
        super().__init__("There have been multiple runtime errors.")


class ErrorAggregator:
    """Append-only list of deferred errors for one run."""

    def __init__(self):
        self._errors: list[DeferredError] = []

    def record(self, error: DeferredError) -> None:
        logger.debug(f"Deferring error from {error.operation}: {error.message}")
        self._errors.append(error)

    @property
    def errors(self) -> list[DeferredError]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def resolve(self) -> None:
        """
        Raise if anything was recorded.

        One error is raised as is. Several are each reported, then
        MultipleRuntimeErrors is raised.
        """
        if len(self._errors) == 1:
            raise self._errors[0]
        if len(self._errors) > 1:
            for error in self._errors:
                actions.error(str(error))
            raise MultipleRuntimeErrors(self._errors)
