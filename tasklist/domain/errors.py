from __future__ import annotations


class ValidationError(ValueError):
    """Rejected user input. ``message`` is safe to show as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
