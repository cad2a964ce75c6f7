"""Custom exception hierarchy for sphinx2md."""

from __future__ import annotations


class Sphinx2MdError(Exception):
    """Base exception for all sphinx2md errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(Sphinx2MdError):
    """A conversion result is malformed and cannot be transformed.

    Examples: missing ``meta``, empty ``python_api_name``, API name without an
    API type.
    """

    def __init__(
        self,
        message: str = "",
        index: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.field = field
