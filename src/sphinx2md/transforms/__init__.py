"""Built-in result transforms — auto-registered on import."""

from sphinx2md.transforms.add_front_matter import add_front_matter, render_front_matter

__all__ = [
    "add_front_matter",
    "render_front_matter",
]
