"""
Non-fatal assertions.

Status-code mismatches are recorded and the case keeps running so later
diagnostics (counts, logged payloads) still happen. Everything recorded is
raised as one AssertionError when the block ends:

    with Checks() as check:
        check.status(result, 200)
        assert result.error is None, f"Error getting products: {result.error}"
        ...
"""

from typing import List


class Checks:
    """Collects soft failures for one test case."""

    def __init__(self):
        self.failures: List[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.verify()
            return False
        if issubclass(exc_type, AssertionError) and self.failures:
            raise AssertionError("; ".join(self.failures + [str(exc)])) from exc
        return False

    def expect(self, condition, message: str) -> bool:
        if not condition:
            self.failures.append(message)
        return bool(condition)

    def equal(self, actual, expected, what: str = "value") -> bool:
        return self.expect(actual == expected, f"Expected {what} {expected}, but got {actual}")

    def status(self, result, expected: int) -> bool:
        return self.equal(result.status, expected, "status code")

    def fail(self, message: str):
        self.failures.append(message)

    def verify(self):
        if self.failures:
            raise AssertionError("; ".join(self.failures))
