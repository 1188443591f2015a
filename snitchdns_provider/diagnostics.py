#
#
#

from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class Diagnostic:
    summary: str
    detail: str
    exception: Optional[Exception] = None


class DiagnosticsSink(Protocol):
    """Where reconcilers report failures back to the host."""

    def add_error(
        self, summary: str, detail: str, exception: Exception = None
    ) -> None:
        ...


class Diagnostics:
    def __init__(self):
        self.errors: List[Diagnostic] = []

    def add_error(self, summary, detail, exception=None):
        self.errors.append(Diagnostic(summary, detail, exception))

    def has_error(self):
        return bool(self.errors)

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)
