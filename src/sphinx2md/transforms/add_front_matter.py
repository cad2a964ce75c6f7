"""Result transform: prepend API front matter to converted pages."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sphinx2md.config.defaults import (
    DESCRIPTION_PREFIX,
    FRONT_MATTER_DELIMITER,
    IN_PAGE_TOC_MIN_HEADING_LEVEL,
)
from sphinx2md.errors.exceptions import InvalidInputError
from sphinx2md.string_utils import get_last_part_from_full_identifier
from sphinx2md.transforms.registry import register_result_transform
from sphinx2md.types import SphinxToMdResult

logger = logging.getLogger(__name__)


def render_front_matter(api_name: str, api_type: str) -> str:
    """Build the front matter block for one API page.

    The block starts and ends with a ``---`` line and has no trailing
    newline. Keys are emitted in a fixed order.
    """
    lines = [
        FRONT_MATTER_DELIMITER,
        f"title: {get_last_part_from_full_identifier(api_name)}",
        f"description: {DESCRIPTION_PREFIX}{api_name}",
        f"in_page_toc_min_heading_level: {IN_PAGE_TOC_MIN_HEADING_LEVEL}",
        f"python_api_type: {api_type}",
        f"python_api_name: {api_name}",
        FRONT_MATTER_DELIMITER,
    ]
    return "\n".join(lines)


@register_result_transform("add_front_matter")
def add_front_matter(results: Sequence[SphinxToMdResult]) -> list[SphinxToMdResult]:
    """Prepend front matter to every result whose metadata names an API.

    Results without ``meta.python_api_name`` are returned as-is. The others
    are copied with ``markdown`` replaced by the front matter, a blank line,
    the original body and a trailing newline. Input records are not mutated.

    Must be applied at most once per result: a second pass adds a second
    header in front of the first.

    Raises:
        InvalidInputError: If a result has no ``meta``, an empty API name,
            or an API name without an API type.
    """
    output: list[SphinxToMdResult] = []
    injected = 0
    for index, result in enumerate(results):
        meta = result.meta
        if meta is None:
            raise InvalidInputError(
                f"Result {index} has no metadata", index=index, field="meta"
            )

        if not result.has_api_name:
            output.append(result)
            continue

        api_name = meta.python_api_name
        if not api_name:
            raise InvalidInputError(
                f"Result {index} has an empty python_api_name",
                index=index,
                field="python_api_name",
            )
        if not meta.python_api_type:
            raise InvalidInputError(
                f"Result {index} ({api_name}) has no python_api_type",
                index=index,
                field="python_api_type",
            )

        header = render_front_matter(api_name, meta.python_api_type)
        markdown = f"{header}\n\n{result.markdown}\n"
        output.append(result.model_copy(update={"markdown": markdown}, deep=True))
        injected += 1
        logger.debug("Added front matter for '%s'", api_name)

    logger.info("Added front matter to %d of %d results", injected, len(output))
    return output
