"""Composer: converts event streams to node graphs.

Expects the host class to provide:
- check_event(*choices) -> bool
- get_event() -> Event
- peek_event() -> Event
- resolve(kind, value, implicit) -> tag  (from Resolver)
- options -> LoaderOptions
"""

import logging

from yamlcompose.comments import CommentEventsCollector, CommentType
from yamlcompose.error import MarkedYAMLError, ResourceLimitError
from yamlcompose.events import (
    NodeEvent,
    StreamStartEvent, StreamEndEvent,
    AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from yamlcompose.guard import ResourceGuard
from yamlcompose.nodes import ScalarNode, SequenceNode, MappingNode
from yamlcompose.resolver import COMMENT_TAG, MERGE_TAG

logger = logging.getLogger(__name__)


class ComposerError(MarkedYAMLError):
    """YAML composer error (e.g., undefined alias)."""
    pass


class Composer:
    """Builds one node graph per document.

    Anchors are registered as soon as a node starts, before its children,
    so an alias inside a collection may refer to the collection itself.
    Nodes that are still being composed live in ``recursive_nodes``; an
    alias that lands on one of them marks it for two-step construction.
    """

    def __init__(self):
        self.anchors = {}
        self.recursive_nodes = set()
        self.guard = ResourceGuard(self.options)
        self.block_comments_collector = CommentEventsCollector(
            self, CommentType.BLANK_LINE, CommentType.BLOCK)
        self.inline_comments_collector = CommentEventsCollector(
            self, CommentType.IN_LINE)

    def check_node(self):
        # Drop StreamStartEvent
        if self.check_event(StreamStartEvent):
            self.get_event()
        return not self.check_event(StreamEndEvent)

    def get_node(self):
        # Comments between documents
        self.block_comments_collector.collect_events()
        if self.check_event(StreamEndEvent):
            comment_lines = self.block_comments_collector.consume()
            if not comment_lines:
                return None
            node = MappingNode(COMMENT_TAG, [],
                               start_mark=comment_lines[0].start_mark,
                               end_mark=comment_lines[-1].end_mark,
                               flow_style=False,
                               resolved=False)
            node.block_comments = comment_lines
            return node
        return self.compose_document()

    def get_single_node(self):
        # Drop StreamStartEvent
        self.get_event()
        document = None
        if not self.check_event(StreamEndEvent):
            document = self.get_node()
        if not self.check_event(StreamEndEvent):
            event = self.get_event()
            context_mark = document.start_mark if document is not None else None
            raise ComposerError(
                "expected a single document in the stream", context_mark,
                "but found another document",
                event.start_mark if event is not None else None)
        # Drop StreamEndEvent
        self.get_event()
        return document

    def compose_document(self):
        # Drop DocumentStartEvent
        start_event = self.get_event()
        try:
            node = self.compose_node(None)
            self.block_comments_collector.collect_events()
            if not self.block_comments_collector.is_empty():
                node.end_comments = self.block_comments_collector.consume()
        except RecursionError as exc:
            # The interpreter stack ran out before the nesting depth limit
            logger.debug("interpreter recursion limit hit at depth %d",
                         self.guard.depth)
            raise ResourceLimitError(
                "Nesting depth exceeded the interpreter recursion limit "
                "(nesting_depth_limit is %d)" % self.options.nesting_depth_limit,
                'nesting_depth_limit', self.options.nesting_depth_limit) from exc
        except Exception:
            logger.debug("document composition failed, resetting composer state")
            raise
        finally:
            self.guard.reset_depth()
            self.block_comments_collector.consume()
            self.inline_comments_collector.consume()
            self.anchors = {}
            self.recursive_nodes = set()
        # Drop DocumentEndEvent
        self.get_event()
        logger.debug("composed %s document starting at %r",
                     node.id, start_event.start_mark)
        return node

    def compose_node(self, parent):
        self.block_comments_collector.collect_events()
        if parent is not None:
            self.recursive_nodes.add(parent)
        if self.check_event(AliasEvent):
            event = self.get_event()
            anchor = event.anchor
            if anchor not in self.anchors:
                raise ComposerError(
                    None, None,
                    "found undefined alias %r" % anchor,
                    event.start_mark)
            node = self.anchors[anchor]
            if not isinstance(node, ScalarNode):
                self.guard.count_alias()
            if node in self.recursive_nodes:
                node.two_step_construction = True
            # Aliases cannot carry comments
            self.block_comments_collector.consume()
            self.inline_comments_collector.collect_events().consume()
        else:
            event = self.peek_event()
            if not isinstance(event, NodeEvent):
                raise ComposerError(
                    None, None,
                    "expected a node, but found %s"
                    % (type(event).__name__ if event is not None else "end of input"),
                    event.start_mark if event is not None else None)
            anchor = event.anchor
            self.guard.enter()
            if self.check_event(ScalarEvent):
                node = self.compose_scalar_node(
                    anchor, self.block_comments_collector.consume())
            elif self.check_event(SequenceStartEvent):
                node = self.compose_sequence_node(anchor)
            elif self.check_event(MappingStartEvent):
                node = self.compose_mapping_node(anchor)
            else:
                raise ComposerError(
                    None, None,
                    "expected a node, but found %s" % type(event).__name__,
                    event.start_mark)
            self.guard.leave()
        self.recursive_nodes.discard(parent)
        return node

    def compose_scalar_node(self, anchor, block_comments):
        event = self.get_event()
        tag = event.tag
        resolved = False
        if tag is None or tag == '!':
            tag = self.resolve(ScalarNode, event.value, event.implicit)
            resolved = True
        node = ScalarNode(tag, event.value,
                          start_mark=event.start_mark,
                          end_mark=event.end_mark,
                          style=event.style,
                          resolved=resolved)
        if anchor is not None:
            node.anchor = anchor
            self.anchors[anchor] = node
        node.block_comments = block_comments
        node.inline_comments = self.inline_comments_collector.collect_events().consume()
        return node

    def compose_sequence_node(self, anchor):
        start_event = self.get_event()
        tag = start_event.tag
        resolved = False
        if tag is None or tag == '!':
            tag = self.resolve(SequenceNode, None, start_event.implicit)
            resolved = True
        node = SequenceNode(tag, [],
                            start_mark=start_event.start_mark,
                            end_mark=None,
                            flow_style=start_event.flow_style,
                            resolved=resolved)
        if start_event.is_flow():
            node.block_comments = self.block_comments_collector.consume()
        if anchor is not None:
            node.anchor = anchor
            self.anchors[anchor] = node
        while not self.check_event(SequenceEndEvent):
            self.block_comments_collector.collect_events()
            # Comments right before the closing event are not a child
            if self.check_event(SequenceEndEvent):
                break
            node.value.append(self.compose_node(node))
        self._finish_collection(node, start_event)
        return node

    def compose_mapping_node(self, anchor):
        start_event = self.get_event()
        tag = start_event.tag
        resolved = False
        if tag is None or tag == '!':
            tag = self.resolve(MappingNode, None, start_event.implicit)
            resolved = True
        node = MappingNode(tag, [],
                           start_mark=start_event.start_mark,
                           end_mark=None,
                           flow_style=start_event.flow_style,
                           resolved=resolved)
        if start_event.is_flow():
            node.block_comments = self.block_comments_collector.consume()
        if anchor is not None:
            node.anchor = anchor
            self.anchors[anchor] = node
        while not self.check_event(MappingEndEvent):
            self.block_comments_collector.collect_events()
            if self.check_event(MappingEndEvent):
                break
            self.compose_mapping_children(node.value, node)
        self._finish_collection(node, start_event)
        return node

    def compose_mapping_children(self, children, node):
        item_key = self.compose_key_node(node)
        if item_key.tag == MERGE_TAG:
            node.merged = True
        item_value = self.compose_value_node(node)
        children.append((item_key, item_value))

    def compose_key_node(self, node):
        return self.compose_node(node)

    def compose_value_node(self, node):
        return self.compose_node(node)

    def _finish_collection(self, node, start_event):
        if start_event.is_flow():
            node.inline_comments = self.inline_comments_collector.collect_events().consume()
        end_event = self.get_event()
        node.end_mark = end_event.end_mark
        # Trailing comment on the line of the closing event
        self.inline_comments_collector.collect_events()
        if not self.inline_comments_collector.is_empty():
            node.inline_comments = self.inline_comments_collector.consume()
