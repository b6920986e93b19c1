import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    qualified_name: str  # class whose stub failed
    message: str
    error: Optional[BaseException] = None


@dataclass
class Diagnostics:
    """
    Failures collected during one processing pass. Each failure is logged
    with its stack trace when reported, and kept for the caller.
    """
    entries: list[Diagnostic] = field(default_factory=list)

    def report(self, qualified_name: str, error: BaseException):
        logger.error("Cannot generate RMI script for %s: %s", qualified_name, error, exc_info=error)
        self.entries.append(Diagnostic(qualified_name, str(error), error))

    def has_errors(self) -> bool:
        return bool(self.entries)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
