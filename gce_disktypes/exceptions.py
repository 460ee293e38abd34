"""Exception classes for the disk-types client."""

from __future__ import annotations


class ComputeError(Exception):
    """Raised when a Compute Engine API request fails.

    Attributes:
        code: Machine-readable error code, the first ``reason`` of the
            Google error envelope (e.g. ``"notFound"``) or ``"HTTP_<status>"``.
        status: HTTP status code of the response.
        message: Human-readable error description.
    """

    def __init__(self, message: str, *, code: str, status: int) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
        self.message = message

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __repr__(self) -> str:
        return (
            f"ComputeError(code={self.code!r}, status={self.status}, "
            f"message={self.message!r})"
        )

    def __str__(self) -> str:
        return f"[{self.code}] {self.message} (HTTP {self.status})"


class ConfigError(Exception):
    """Raised when client configuration is missing or invalid."""
