"""Loader configuration."""

DEFAULT_NESTING_DEPTH_LIMIT = 50
DEFAULT_MAX_ALIASES_FOR_COLLECTIONS = 50


class LoaderOptions:
    """Limits and switches consumed by the composer and the event source.

    Attributes:
        nesting_depth_limit: Deepest allowed node nesting (positive int)
        max_aliases_for_collections: Allowed number of aliases that point
            at sequences or mappings, per loader (non-negative int)
        process_comments: Keep comment events in the stream so they are
            attached to nodes
    """

    def __init__(self, nesting_depth_limit=DEFAULT_NESTING_DEPTH_LIMIT,
                 max_aliases_for_collections=DEFAULT_MAX_ALIASES_FOR_COLLECTIONS,
                 process_comments=False):
        self.nesting_depth_limit = nesting_depth_limit
        self.max_aliases_for_collections = max_aliases_for_collections
        self.process_comments = process_comments

    @property
    def nesting_depth_limit(self):
        return self._nesting_depth_limit

    @nesting_depth_limit.setter
    def nesting_depth_limit(self, value):
        if not _is_int(value) or value < 1:
            raise ValueError(
                "nesting_depth_limit must be a positive integer, got %r" % (value,))
        self._nesting_depth_limit = value

    @property
    def max_aliases_for_collections(self):
        return self._max_aliases_for_collections

    @max_aliases_for_collections.setter
    def max_aliases_for_collections(self, value):
        if not _is_int(value) or value < 0:
            raise ValueError(
                "max_aliases_for_collections must be a non-negative integer, "
                "got %r" % (value,))
        self._max_aliases_for_collections = value

    def __repr__(self):
        return ('LoaderOptions(nesting_depth_limit=%d, '
                'max_aliases_for_collections=%d, process_comments=%r)' % (
                    self.nesting_depth_limit, self.max_aliases_for_collections,
                    self.process_comments))


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)
