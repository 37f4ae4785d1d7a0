"""Comment lines and the collector that buffers them off the event stream."""

import enum

from yamlcompose.events import CommentEvent


class CommentType(enum.Enum):
    """Where a comment sits relative to the surrounding content."""

    BLANK_LINE = 'blank_line'
    BLOCK = 'block'
    IN_LINE = 'in_line'


class CommentLine:
    """One comment (or blank line) attached to a node."""

    def __init__(self, start_mark, end_mark, value, comment_type):
        self.start_mark = start_mark
        self.end_mark = end_mark
        self.value = value
        self.comment_type = comment_type

    @classmethod
    def from_event(cls, event):
        return cls(event.start_mark, event.end_mark, event.value,
                   event.comment_type)

    def __repr__(self):
        return '<%s (type=%s, value=%r)>' % (
            self.__class__.__name__, self.comment_type.name, self.value)


class CommentEventsCollector:
    """Buffer consecutive comment events of the expected types.

    The event source must provide check_event() and peek_event() /
    get_event(). Only comment events whose type is one of the expected
    types are taken off the stream; collection stops at the first event
    that is not.
    """

    def __init__(self, event_source, *expected_types):
        self.event_source = event_source
        self.expected_types = frozenset(expected_types)
        self.comment_lines = []

    def _is_expected(self, event):
        return isinstance(event, CommentEvent) \
            and event.comment_type in self.expected_types

    def collect_events(self):
        """Move pending expected comment events into the buffer."""
        while self.event_source.check_event(CommentEvent) \
                and self._is_expected(self.event_source.peek_event()):
            self.comment_lines.append(
                CommentLine.from_event(self.event_source.get_event()))
        return self

    def consume(self):
        """Return the buffered comment lines and empty the buffer."""
        comment_lines = self.comment_lines
        self.comment_lines = []
        return comment_lines

    def is_empty(self):
        return not self.comment_lines
