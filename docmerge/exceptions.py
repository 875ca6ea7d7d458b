"""Custom exceptions for docmerge."""


class DocMergeError(Exception):
    """Base exception for docmerge errors."""

    pass


class RepositoryFetchError(DocMergeError):
    """Repository could not be cloned after every fallback attempt."""

    pass


class OutputDirectoryError(DocMergeError):
    """Output root could not be cleared or created."""

    pass
