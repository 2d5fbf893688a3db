"""Exceptions raised by the data-access layer."""


class RepositoryConfigurationError(ValueError):
    """A repository was bound to a model it cannot serve."""
