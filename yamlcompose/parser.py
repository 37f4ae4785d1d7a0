"""Event source for the composer.

Parser is a mixin that buffers the event stream and exposes the
check_event/peek_event/get_event protocol the composer reads from. Events
either come from an iterable of Event objects or from YAML text, which is
parsed with PyYAML and converted to this package's event classes.
"""

import yaml

from yamlcompose.error import MarkedYAMLError, YAMLError
from yamlcompose.events import (
    Event, CommentEvent,
    StreamStartEvent, StreamEndEvent,
    DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)


class ScannerError(MarkedYAMLError):
    """YAML scanner error (tokenization phase)."""
    pass


class ParserError(MarkedYAMLError):
    """YAML parser error (grammar phase)."""
    pass


def _convert_error(exc):
    if isinstance(exc, yaml.scanner.ScannerError):
        cls = ScannerError
    elif isinstance(exc, yaml.parser.ParserError):
        cls = ParserError
    elif isinstance(exc, yaml.MarkedYAMLError):
        cls = MarkedYAMLError
    else:
        return YAMLError(str(exc))
    return cls(exc.context, exc.context_mark,
               exc.problem, exc.problem_mark, exc.note)


def _pyyaml_to_event(ev):
    """Convert a PyYAML event to an Event object."""
    sm, em = ev.start_mark, ev.end_mark
    if isinstance(ev, yaml.StreamStartEvent):
        return StreamStartEvent(start_mark=sm, end_mark=em,
                                encoding=ev.encoding)
    elif isinstance(ev, yaml.StreamEndEvent):
        return StreamEndEvent(start_mark=sm, end_mark=em)
    elif isinstance(ev, yaml.DocumentStartEvent):
        return DocumentStartEvent(start_mark=sm, end_mark=em,
                                  explicit=ev.explicit,
                                  version=ev.version,
                                  tags=ev.tags)
    elif isinstance(ev, yaml.DocumentEndEvent):
        return DocumentEndEvent(start_mark=sm, end_mark=em,
                                explicit=ev.explicit)
    elif isinstance(ev, yaml.AliasEvent):
        return AliasEvent(ev.anchor, start_mark=sm, end_mark=em)
    elif isinstance(ev, yaml.ScalarEvent):
        return ScalarEvent(ev.anchor, ev.tag, ev.implicit, ev.value,
                           start_mark=sm, end_mark=em, style=ev.style)
    elif isinstance(ev, yaml.SequenceStartEvent):
        return SequenceStartEvent(ev.anchor, ev.tag, ev.implicit,
                                  start_mark=sm, end_mark=em,
                                  flow_style=ev.flow_style)
    elif isinstance(ev, yaml.SequenceEndEvent):
        return SequenceEndEvent(start_mark=sm, end_mark=em)
    elif isinstance(ev, yaml.MappingStartEvent):
        return MappingStartEvent(ev.anchor, ev.tag, ev.implicit,
                                 start_mark=sm, end_mark=em,
                                 flow_style=ev.flow_style)
    elif isinstance(ev, yaml.MappingEndEvent):
        return MappingEndEvent(start_mark=sm, end_mark=em)
    else:
        raise ValueError("Unknown event type: %s" % type(ev).__name__)


def parse_text(stream):
    """Parse YAML text and return the list of converted events.

    ``stream`` may be a str, bytes (UTF-8/UTF-16 with BOM detection) or a
    file-like object.
    """
    try:
        return [_pyyaml_to_event(ev)
                for ev in yaml.parse(stream, Loader=yaml.SafeLoader)]
    except yaml.YAMLError as exc:
        raise _convert_error(exc) from exc


def _is_event_iterable(stream):
    if isinstance(stream, (str, bytes)) or hasattr(stream, 'read'):
        return False
    return hasattr(stream, '__iter__')


class Parser:
    """Buffered event source.

    Expects the host class to provide ``options`` (LoaderOptions).
    """

    def __init__(self, stream=None):
        self.stream = stream
        if isinstance(stream, str):
            self.name = '<unicode string>'
        elif isinstance(stream, bytes):
            self.name = '<byte string>'
        elif _is_event_iterable(stream):
            self.name = '<events>'
        else:
            self.name = getattr(stream, 'name', '<file>')
        self._events = None
        self._event_idx = 0

    def _ensure_events(self):
        if self._events is None:
            stream = self.stream
            if stream is None:
                stream = ''
            if _is_event_iterable(stream):
                events = list(stream)
                for event in events:
                    if not isinstance(event, Event):
                        raise TypeError(
                            "expected Event objects, got %s" % type(event).__name__)
            else:
                events = parse_text(stream)
            if not self.options.process_comments:
                events = [event for event in events
                          if not isinstance(event, CommentEvent)]
            self._events = events
            self._event_idx = 0

    def check_event(self, *choices):
        self._ensure_events()
        if self._event_idx >= len(self._events):
            return False
        if not choices:
            return True
        return isinstance(self._events[self._event_idx], choices)

    def peek_event(self):
        self._ensure_events()
        if self._event_idx < len(self._events):
            return self._events[self._event_idx]
        return None

    def get_event(self):
        self._ensure_events()
        if self._event_idx < len(self._events):
            ev = self._events[self._event_idx]
            self._event_idx += 1
            return ev
        return None

    def dispose(self):
        self.stream = None
        self._events = None
        self._event_idx = 0
