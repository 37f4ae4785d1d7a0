"""Tests for the resource guard and loader options."""

import pytest

from yamlcompose import LoaderOptions, ResourceLimitError, YAMLError
from yamlcompose.guard import ResourceGuard


def _guard(nesting_depth_limit, max_aliases_for_collections):
    return ResourceGuard(LoaderOptions(
        nesting_depth_limit=nesting_depth_limit,
        max_aliases_for_collections=max_aliases_for_collections))


class TestResourceGuard:
    """Test the depth and alias counters."""

    def test_enter_leave(self):
        """Depth follows enter/leave calls."""
        guard = _guard(5, 5)
        guard.enter()
        guard.enter()
        assert guard.depth == 2
        guard.leave()
        assert guard.depth == 1

    def test_depth_checked_before_increment(self):
        """Depth may reach limit + 1; the next enter fails."""
        guard = _guard(2, 5)
        for _ in range(3):
            guard.enter()
        assert guard.depth == 3
        with pytest.raises(ResourceLimitError) as exc_info:
            guard.enter()
        assert exc_info.value.maximum == 2
        assert guard.depth == 3

    def test_negative_depth_rejected(self):
        """Leaving more often than entering is an internal error."""
        guard = _guard(2, 5)
        with pytest.raises(YAMLError):
            guard.leave()

    def test_alias_limit(self):
        """The alias past the maximum fails."""
        guard = _guard(2, 2)
        guard.count_alias()
        guard.count_alias()
        with pytest.raises(ResourceLimitError) as exc_info:
            guard.count_alias()
        assert "max=2" in str(exc_info.value)
        assert guard.aliases == 3

    def test_zero_aliases_allowed(self):
        """With a maximum of zero the first alias fails."""
        guard = _guard(2, 0)
        with pytest.raises(ResourceLimitError):
            guard.count_alias()

    def test_reset_depth_keeps_alias_count(self):
        """reset_depth() leaves the alias counter alone."""
        guard = _guard(5, 5)
        guard.enter()
        guard.count_alias()
        guard.reset_depth()
        assert guard.depth == 0
        assert guard.aliases == 1

    def test_limits_follow_options(self):
        """Changing the options after construction changes the limits."""
        options = LoaderOptions(nesting_depth_limit=5, max_aliases_for_collections=5)
        guard = ResourceGuard(options)
        guard.enter()
        guard.enter()
        options.nesting_depth_limit = 1
        assert guard.nesting_depth_limit == 1
        with pytest.raises(ResourceLimitError):
            guard.enter()
        options.max_aliases_for_collections = 0
        with pytest.raises(ResourceLimitError):
            guard.count_alias()


class TestLoaderOptions:
    """Test option defaults and validation."""

    def test_defaults(self):
        """Defaults are finite."""
        options = LoaderOptions()
        assert options.nesting_depth_limit == 50
        assert options.max_aliases_for_collections == 50
        assert options.process_comments is False

    @pytest.mark.parametrize('value', [0, -1, 1.5, True, '10', None])
    def test_invalid_nesting_depth_limit(self, value):
        """nesting_depth_limit must be a positive integer."""
        with pytest.raises(ValueError):
            LoaderOptions(nesting_depth_limit=value)

    @pytest.mark.parametrize('value', [-1, 2.0, False, '3'])
    def test_invalid_alias_maximum(self, value):
        """max_aliases_for_collections must be a non-negative integer."""
        with pytest.raises(ValueError):
            LoaderOptions(max_aliases_for_collections=value)

    def test_assignment_validated(self):
        """Limits are validated on assignment too."""
        options = LoaderOptions()
        options.max_aliases_for_collections = 0
        assert options.max_aliases_for_collections == 0
        with pytest.raises(ValueError):
            options.nesting_depth_limit = 0
