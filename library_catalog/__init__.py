"""Library catalog REST service: authors and books."""
