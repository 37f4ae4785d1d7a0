"""
yamlcompose - compose YAML event streams into node graphs

Turns a stream of parser events into one rooted node graph per document.
Tags are resolved, anchors and aliases are linked (including aliases that
point back at an enclosing node), nesting depth and alias fan-out are
limited, and comment events are attached to the nodes they belong to.

Example:
    >>> import yamlcompose
    >>> node = yamlcompose.compose("base: &b {x: 1}\\nother: *b")
    >>> node.value[1][1] is node.value[0][1]
    True
"""

from yamlcompose.error import Mark, YAMLError, MarkedYAMLError, ResourceLimitError
from yamlcompose.parser import ParserError, ScannerError
from yamlcompose.composer import ComposerError
from yamlcompose.comments import CommentLine, CommentType
from yamlcompose.events import (
    Event, NodeEvent, CollectionStartEvent, CollectionEndEvent,
    StreamStartEvent, StreamEndEvent, DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent, SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent, CommentEvent,
)
from yamlcompose.nodes import (
    Node, ScalarNode, CollectionNode, SequenceNode, MappingNode,
)
from yamlcompose.options import LoaderOptions
from yamlcompose.resolver import BaseResolver, Resolver
from yamlcompose.loader import BaseLoader, Loader

__version__ = "0.1.0"


def parse(stream, Loader=Loader, options=None):
    """Parse a YAML stream and yield Event objects."""
    loader = Loader(stream, options=options)
    try:
        while loader.check_event():
            yield loader.get_event()
    finally:
        loader.dispose()


def compose(stream, Loader=Loader, options=None):
    """Compose the single document of a stream into a node graph.

    Args:
        stream: YAML text (str, bytes or file-like object) or an iterable
            of Event objects
        Loader: Loader class
        options: LoaderOptions, defaults to LoaderOptions()

    Returns:
        The root node, or None for an empty stream

    Raises:
        ComposerError: If the stream holds more than one document or an
            alias is undefined
        ResourceLimitError: If nesting or alias limits are exceeded
    """
    loader = Loader(stream, options=options)
    try:
        return loader.get_single_node()
    finally:
        loader.dispose()


def compose_all(stream, Loader=Loader, options=None):
    """Compose every document of a stream, yielding one root node each."""
    loader = Loader(stream, options=options)
    try:
        while loader.check_node():
            node = loader.get_node()
            if node is None:
                break
            yield node
    finally:
        loader.dispose()


__all__ = [
    "Mark",
    "YAMLError",
    "MarkedYAMLError",
    "ResourceLimitError",
    "ParserError",
    "ScannerError",
    "ComposerError",
    "CommentLine",
    "CommentType",
    "Event",
    "NodeEvent",
    "CollectionStartEvent",
    "CollectionEndEvent",
    "StreamStartEvent",
    "StreamEndEvent",
    "DocumentStartEvent",
    "DocumentEndEvent",
    "AliasEvent",
    "ScalarEvent",
    "SequenceStartEvent",
    "SequenceEndEvent",
    "MappingStartEvent",
    "MappingEndEvent",
    "CommentEvent",
    "Node",
    "ScalarNode",
    "CollectionNode",
    "SequenceNode",
    "MappingNode",
    "LoaderOptions",
    "BaseResolver",
    "Resolver",
    "BaseLoader",
    "Loader",
    "parse",
    "compose",
    "compose_all",
]
