"""Error classes and source positions.

Marks and marked errors are PyYAML's own, so positions coming out of the
PyYAML event parser are used as they are and errors render their source
snippet the same way. ResourceLimitError is specific to the composer.
"""

from yaml.error import Mark, YAMLError, MarkedYAMLError

__all__ = ['Mark', 'YAMLError', 'MarkedYAMLError', 'ResourceLimitError']


class ResourceLimitError(YAMLError):
    """A configured resource limit was exceeded.

    Raised when the nesting depth or the number of aliases to collections
    grows past the loader options. This guards against hostile input
    (deeply nested or "billion laughs" style documents) and is never
    recoverable for the current parse.

    Attributes:
        limit: Name of the exceeded option
        maximum: The configured maximum
    """

    def __init__(self, message, limit=None, maximum=None):
        super().__init__(message)
        self.limit = limit
        self.maximum = maximum
