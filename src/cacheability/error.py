class UnsupportedHeaders(TypeError):
    """Raised when a header collection is neither a mapping nor supports get()."""
