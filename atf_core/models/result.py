"""Models for test case results."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class Status(StrEnum):
    """How a test case concluded."""

    PASSED = "passed"
    SKIPPED = "skipped"
    FAILED = "failed"


def _with_line(reason: str, line: int | None) -> str:
    if line is None:
        return reason
    return f"{line}: {reason}"


@dataclass(frozen=True)
class TestCaseResult:
    """Result of a single test case execution.

    Instances are always one of the ``Passed``, ``Skipped`` or ``Failed``
    variants. Only skipped and failed results store a reason, so a passed
    result with a reason, or a failure without one, cannot be built.
    """

    __test__ = False

    status: ClassVar[Status]

    def __new__(cls, *args: object, **kwargs: object) -> "TestCaseResult":
        if cls is TestCaseResult:
            raise TypeError(
                "TestCaseResult cannot be built directly; "
                "use passed(), skipped() or failed()"
            )
        return super().__new__(cls)

    @staticmethod
    def passed() -> "Passed":
        """Create a result for a test case that passed."""
        return Passed()

    @staticmethod
    def skipped(reason: str, line: int | None = None) -> "Skipped":
        """Create a result for a skipped test case.

        Args:
            reason: Human-readable explanation of why the test was skipped
            line: Source line that triggered the skip; folded into the
                reason as a ``"<line>: "`` prefix

        """
        return Skipped(reason=_with_line(reason, line))

    @staticmethod
    def failed(reason: str, line: int | None = None) -> "Failed":
        """Create a result for a failed test case.

        Args:
            reason: Human-readable explanation of the failure
            line: Source line that triggered the failure; folded into the
                reason as a ``"<line>: "`` prefix

        """
        return Failed(reason=_with_line(reason, line))

    def __str__(self) -> str:
        if self.status is Status.PASSED:
            return self.status.value
        return f"{self.status.value}: {self.reason}"


@dataclass(frozen=True)
class Passed(TestCaseResult):
    """The test case passed."""

    status: ClassVar[Status] = Status.PASSED

    @property
    def reason(self) -> str:
        return ""


@dataclass(frozen=True, kw_only=True)
class Skipped(TestCaseResult):
    """The test case was skipped."""

    status: ClassVar[Status] = Status.SKIPPED

    reason: str


@dataclass(frozen=True, kw_only=True)
class Failed(TestCaseResult):
    """The test case failed."""

    status: ClassVar[Status] = Status.FAILED

    reason: str
