"""
Error types raised by the SEO planner.

All errors derive from SeoPlannerError so a presentation layer can catch a
single type and turn it into an ``{"error": ...}`` response. ``status_code``
carries the HTTP status that layer should use.
"""

from typing import Optional


class SeoPlannerError(Exception):
    """Base class for every planner failure."""

    status_code = 500


class InvalidInputError(SeoPlannerError):
    """The caller supplied an empty handle list, a malformed URL or body."""

    status_code = 400


class FetchError(SeoPlannerError):
    """Upstream channel or video data could not be fetched or parsed."""

    status_code = 502

    def __init__(self, source: str, message: Optional[str] = None):
        self.source = source
        self.reason = message or "unknown error"
        super().__init__(f"Failed to fetch {source}: {self.reason}")


class AnalysisError(SeoPlannerError):
    """A video record violated the shape the analyzers rely on."""


class InsufficientDataError(AnalysisError):
    """A channel has no videos but the caller required non-empty insights."""
