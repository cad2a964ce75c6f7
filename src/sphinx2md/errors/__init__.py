"""Error handling — exception hierarchy for sphinx2md."""

from sphinx2md.errors.exceptions import InvalidInputError, Sphinx2MdError

__all__ = [
    "Sphinx2MdError",
    "InvalidInputError",
]
