import os
from collections.abc import Callable
from typing import Any

import pytest

from vecta.vecta_interpreter import Context
from vecta.vecta_runner import evaluate, new_context
from vecta.vecta_values import Value

# Subprocess coverage for CI containers where the collector teardown asserts
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()

    import coverage.collector

    def safe_stop(self: Any) -> None:
        if self in getattr(self, "_collectors", []):
            self._collectors.remove(self)

    coverage.collector.Collector.stop = safe_stop

LABEL = "<test>"


@pytest.fixture  # type: ignore[misc]
def context() -> Context:
    return new_context()


@pytest.fixture  # type: ignore[misc]
def ev(context: Context) -> Callable[[str], Value]:
    """Evaluates source lines one after another in a shared context."""

    def _ev(source: str) -> Value:
        return evaluate(source, LABEL, context)

    return _ev
