"""Package-level default values for generated front matter."""

from __future__ import annotations

# Front matter block markers
FRONT_MATTER_DELIMITER = "---"

# Fixed front matter values read by the docs site
DESCRIPTION_PREFIX = "API reference for "
IN_PAGE_TOC_MIN_HEADING_LEVEL = 1

# Separator between parts of a fully-qualified identifier
IDENTIFIER_SEPARATOR = "."
