"""Implicit tag resolution.

Maps a node kind (and, for plain scalars, the scalar text) to a tag. The
YAML 1.1 implicit resolver table is taken from PyYAML, which also produces
the events.
"""

import yaml.resolver

from yamlcompose.nodes import ScalarNode, SequenceNode, MappingNode

DEFAULT_SCALAR_TAG = 'tag:yaml.org,2002:str'
DEFAULT_SEQUENCE_TAG = 'tag:yaml.org,2002:seq'
DEFAULT_MAPPING_TAG = 'tag:yaml.org,2002:map'
MERGE_TAG = 'tag:yaml.org,2002:merge'
# Tag of the placeholder node returned for trailing comments.
COMMENT_TAG = 'tag:yaml.org,2002:comment'


class BaseResolver:
    """Base YAML tag resolver."""
    yaml_implicit_resolvers = {}

    DEFAULT_SCALAR_TAG = DEFAULT_SCALAR_TAG
    DEFAULT_SEQUENCE_TAG = DEFAULT_SEQUENCE_TAG
    DEFAULT_MAPPING_TAG = DEFAULT_MAPPING_TAG

    @classmethod
    def add_implicit_resolver(cls, tag, regexp, first):
        """Add an implicit resolver."""
        if 'yaml_implicit_resolvers' not in cls.__dict__:
            cls.yaml_implicit_resolvers = {
                key: list(value)
                for key, value in cls.yaml_implicit_resolvers.items()}
        if first is None:
            first = [None]
        for ch in first:
            cls.yaml_implicit_resolvers.setdefault(ch, []).append((tag, regexp))

    def resolve(self, kind, value, implicit):
        """Resolve a tag for a node based on its kind and value.

        For scalars ``implicit`` is the event's (plain, quoted) pair; only
        scalars that may be emitted plain without a tag go through the
        implicit resolvers. Collections ignore ``value`` and ``implicit``.
        """
        if kind is ScalarNode and implicit[0]:
            if value == '':
                resolvers = self.yaml_implicit_resolvers.get('', [])
            else:
                resolvers = self.yaml_implicit_resolvers.get(value[0], [])
            wildcard_resolvers = self.yaml_implicit_resolvers.get(None, [])
            for tag, regexp in resolvers + wildcard_resolvers:
                if regexp.match(value):
                    return tag
        if kind is ScalarNode:
            return self.DEFAULT_SCALAR_TAG
        elif kind is SequenceNode:
            return self.DEFAULT_SEQUENCE_TAG
        elif kind is MappingNode:
            return self.DEFAULT_MAPPING_TAG
        return self.DEFAULT_SCALAR_TAG


class Resolver(BaseResolver):
    """Standard YAML resolver with implicit resolvers for common types."""
    # Own lists so add_implicit_resolver never touches PyYAML's table.
    yaml_implicit_resolvers = {
        key: list(value)
        for key, value in yaml.resolver.Resolver.yaml_implicit_resolvers.items()}
