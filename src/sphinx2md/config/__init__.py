"""Package-level constants."""
