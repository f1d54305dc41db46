"""Domain models for grocery list export."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportTarget:
    """Destination a grocery list can be sent to."""

    id: str
    name: str
    logo: str
    available: bool


@dataclass(frozen=True)
class ExportOutcome:
    """Acknowledgment returned after an export request."""

    target: str
    status: str
    title: str
    message: str
    url: str | None = None
    content: str | None = None
