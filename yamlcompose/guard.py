"""Nesting depth and alias fan-out limits."""

import logging

from yamlcompose.error import YAMLError, ResourceLimitError

logger = logging.getLogger(__name__)


class ResourceGuard:
    """Counter pair enforcing the composer's resource limits.

    ``depth`` goes up for every node the composer opens and back down when
    it is finished. ``aliases`` counts aliases that resolved to a sequence
    or mapping; it only ever grows for the life of the guard. Both limits
    are read from ``options`` on every check, so changing the options of a
    live loader applies to the next node.
    """

    def __init__(self, options):
        self.options = options
        self._depth = 0
        self._aliases = 0

    @property
    def nesting_depth_limit(self):
        return self.options.nesting_depth_limit

    @property
    def max_aliases_for_collections(self):
        return self.options.max_aliases_for_collections

    @property
    def depth(self):
        return self._depth

    @property
    def aliases(self):
        return self._aliases

    def enter(self):
        # Checked before incrementing: depth may reach limit + 1.
        if self._depth > self.nesting_depth_limit:
            logger.debug("nesting depth %d exceeds limit %d",
                         self._depth, self.nesting_depth_limit)
            raise ResourceLimitError(
                "Nesting depth exceeded max %d" % self.nesting_depth_limit,
                'nesting_depth_limit', self.nesting_depth_limit)
        self._depth += 1

    def leave(self):
        if self._depth <= 0:
            raise YAMLError("Nesting depth cannot be negative")
        self._depth -= 1

    def count_alias(self):
        self._aliases += 1
        if self._aliases > self.max_aliases_for_collections:
            logger.debug("alias %d for a collection exceeds limit %d",
                         self._aliases, self.max_aliases_for_collections)
            raise ResourceLimitError(
                "Number of aliases for non-scalar nodes exceeds the "
                "specified max=%d" % self.max_aliases_for_collections,
                'max_aliases_for_collections', self.max_aliases_for_collections)

    def reset_depth(self):
        self._depth = 0
