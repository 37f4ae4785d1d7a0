"""Parser event classes.

The composer consumes a flat stream of these. The classes follow PyYAML's
event API, with one addition: CommentEvent, which carries a comment line
and its CommentType so the composer can attach it to nodes.
"""


class Event:
    """Base class for all events."""

    def __init__(self, start_mark=None, end_mark=None):
        self.start_mark = start_mark
        self.end_mark = end_mark

    def __repr__(self):
        attributes = [key for key in ['anchor', 'tag', 'implicit', 'value',
                                      'comment_type']
                      if hasattr(self, key)]
        arguments = ', '.join(['%s=%r' % (key, getattr(self, key))
                               for key in attributes])
        return '%s(%s)' % (self.__class__.__name__, arguments)


class NodeEvent(Event):
    """Event that starts a node and may carry an anchor."""

    def __init__(self, anchor, start_mark=None, end_mark=None):
        super().__init__(start_mark, end_mark)
        self.anchor = anchor


class CollectionStartEvent(NodeEvent):

    def __init__(self, anchor, tag, implicit, start_mark=None, end_mark=None,
                 flow_style=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag
        self.implicit = implicit
        self.flow_style = flow_style

    def is_flow(self):
        return self.flow_style is True


class CollectionEndEvent(Event):
    pass


class StreamStartEvent(Event):

    def __init__(self, start_mark=None, end_mark=None, encoding=None):
        super().__init__(start_mark, end_mark)
        self.encoding = encoding


class StreamEndEvent(Event):
    pass


class DocumentStartEvent(Event):

    def __init__(self, start_mark=None, end_mark=None,
                 explicit=None, version=None, tags=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit
        self.version = version
        self.tags = tags


class DocumentEndEvent(Event):

    def __init__(self, start_mark=None, end_mark=None, explicit=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit


class AliasEvent(NodeEvent):
    pass


class ScalarEvent(NodeEvent):
    """Scalar event.

    ``implicit`` is a pair of booleans: whether the tag may be omitted when
    the scalar is emitted plain, and whether it may be omitted when the
    scalar is quoted.
    """

    def __init__(self, anchor, tag, implicit, value,
                 start_mark=None, end_mark=None, style=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag
        self.implicit = implicit
        self.value = value
        self.style = style


class SequenceStartEvent(CollectionStartEvent):
    pass


class SequenceEndEvent(CollectionEndEvent):
    pass


class MappingStartEvent(CollectionStartEvent):
    pass


class MappingEndEvent(CollectionEndEvent):
    pass


class CommentEvent(Event):
    """A comment or blank line found between other events."""

    def __init__(self, comment_type, value, start_mark=None, end_mark=None):
        super().__init__(start_mark, end_mark)
        self.comment_type = comment_type
        self.value = value
