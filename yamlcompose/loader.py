"""Loader classes combining the event source, composer and resolver."""

from yamlcompose.composer import Composer
from yamlcompose.options import LoaderOptions
from yamlcompose.parser import Parser
from yamlcompose.resolver import BaseResolver, Resolver


class BaseLoader(Parser, Composer, BaseResolver):
    """Loader that resolves every untagged node to str, seq or map."""

    def __init__(self, stream=None, options=None):
        self.options = options if options is not None else LoaderOptions()
        Parser.__init__(self, stream)
        Composer.__init__(self)


class Loader(BaseLoader, Resolver):
    """Loader with the standard YAML 1.1 implicit resolvers."""
    pass
