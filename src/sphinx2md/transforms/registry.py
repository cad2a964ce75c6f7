"""Registry of transforms applied to lists of conversion results."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sphinx2md.types import SphinxToMdResult

ResultTransform = Callable[[Sequence[SphinxToMdResult]], list[SphinxToMdResult]]

# Registry of result transform functions
_RESULT_TRANSFORM_REGISTRY: dict[str, ResultTransform] = {}


def register_result_transform(name: str) -> Callable:
    """Decorator to register a result transform function."""

    def decorator(fn: ResultTransform) -> ResultTransform:
        _RESULT_TRANSFORM_REGISTRY[name] = fn
        return fn

    return decorator


def get_result_transform(name: str) -> ResultTransform | None:
    return _RESULT_TRANSFORM_REGISTRY.get(name)


def list_result_transforms() -> list[str]:
    """Return the names of all registered result transforms."""
    return sorted(_RESULT_TRANSFORM_REGISTRY)
