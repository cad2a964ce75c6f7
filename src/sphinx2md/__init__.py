"""sphinx2md — post-conversion stages for Sphinx API reference markdown."""
