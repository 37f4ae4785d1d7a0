"""Node classes that make up a composed document graph.

Scalars hold their raw text, sequences a list of child nodes and mappings
a list of (key, value) node pairs. Aliased nodes are shared by reference,
so a graph may contain cycles.
"""


class Node:
    """Base class for YAML nodes."""

    def __init__(self, tag, value, start_mark=None, end_mark=None,
                 resolved=True):
        self.tag = tag
        self.value = value
        self.start_mark = start_mark
        self.end_mark = end_mark
        self.resolved = resolved
        self.anchor = None
        # Set when an alias referenced this node before it was complete.
        self.two_step_construction = False
        self.block_comments = None
        self.inline_comments = None
        self.end_comments = None

    def __repr__(self):
        value = self.value
        if isinstance(value, list):
            # Children may point back at this node.
            value = '<%d items>' % len(value)
        else:
            value = repr(value)
        return '%s(tag=%r, value=%s)' % (self.__class__.__name__, self.tag, value)


class ScalarNode(Node):
    """Scalar node (strings, numbers, etc.)."""
    id = 'scalar'

    def __init__(self, tag, value, start_mark=None, end_mark=None, style=None,
                 resolved=True):
        super().__init__(tag, value, start_mark, end_mark, resolved)
        self.style = style


class CollectionNode(Node):
    """Base class for collection nodes."""

    def __init__(self, tag, value, start_mark=None, end_mark=None,
                 flow_style=None, resolved=True):
        super().__init__(tag, value, start_mark, end_mark, resolved)
        self.flow_style = flow_style


class SequenceNode(CollectionNode):
    """Sequence node (lists/arrays)."""
    id = 'sequence'


class MappingNode(CollectionNode):
    """Mapping node (dicts/objects)."""
    id = 'mapping'

    def __init__(self, tag, value, start_mark=None, end_mark=None,
                 flow_style=None, resolved=True):
        super().__init__(tag, value, start_mark, end_mark, flow_style, resolved)
        # A key resolved to the merge tag ('<<').
        self.merged = False
