class SearchIndexFormatError(ValueError):
    """Raised when a search index file does not hold a document list."""
