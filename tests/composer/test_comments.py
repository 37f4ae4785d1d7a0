"""Tests for comment attachment and the comment collector."""

from yamlcompose import Loader, LoaderOptions, compose
from yamlcompose.comments import CommentEventsCollector, CommentLine, CommentType
from yamlcompose.events import ScalarEvent

from events_helper import (
    scalar, seq_start, seq_end, map_start, map_end,
    comment, inline, single, stream, document,
)

WITH_COMMENTS = LoaderOptions(process_comments=True)


def _values(comment_lines):
    return [line.value for line in comment_lines]


class TestCommentEventsCollector:
    """Test buffering comment events off the stream."""

    def test_collects_expected_types_only(self):
        """Collection stops at the first comment of another type."""
        loader = Loader([comment(' a'), comment(' b'), inline(' c'), scalar('x')],
                        options=WITH_COMMENTS)
        collector = CommentEventsCollector(loader, CommentType.BLOCK)
        collector.collect_events()
        assert _values(collector.consume()) == [' a', ' b']
        assert loader.peek_event().comment_type is CommentType.IN_LINE

    def test_stops_at_non_comment(self):
        """Non-comment events are left in place."""
        loader = Loader([scalar('x'), comment(' a')], options=WITH_COMMENTS)
        collector = CommentEventsCollector(loader, CommentType.BLOCK)
        assert collector.collect_events().is_empty()
        assert isinstance(loader.peek_event(), ScalarEvent)

    def test_consume_drains_buffer(self):
        """consume() empties the buffer."""
        loader = Loader([comment(' a')], options=WITH_COMMENTS)
        collector = CommentEventsCollector(loader, CommentType.BLOCK)
        lines = collector.collect_events().consume()
        assert len(lines) == 1
        assert isinstance(lines[0], CommentLine)
        assert collector.is_empty()
        assert collector.consume() == []

    def test_blank_lines_collected_with_block_comments(self):
        """Blank lines and block comments may share a collector."""
        loader = Loader([comment('', CommentType.BLANK_LINE), comment(' a')],
                        options=WITH_COMMENTS)
        collector = CommentEventsCollector(
            loader, CommentType.BLANK_LINE, CommentType.BLOCK)
        lines = collector.collect_events().consume()
        assert [line.comment_type for line in lines] == [
            CommentType.BLANK_LINE, CommentType.BLOCK]


class TestCommentAttachment:
    """Test where the composer puts comments."""

    def test_block_and_inline_comments_on_scalars(self):
        """A leading comment goes to the key, a trailing one to the value."""
        node = compose(single(
            map_start(),
            comment(' leading'),
            scalar('k'), scalar('v'), inline(' trailing'),
            map_end()), options=WITH_COMMENTS)
        key, value = node.value[0]
        assert _values(key.block_comments) == [' leading']
        assert key.inline_comments == []
        assert _values(value.inline_comments) == [' trailing']
        assert value.block_comments == []

    def test_flow_sequence_comments(self):
        """Flow collections take leading comments and a closing inline comment."""
        node = compose(single(
            comment(' before'),
            seq_start(flow=True), scalar('1'), seq_end(),
            inline(' after')), options=WITH_COMMENTS)
        assert _values(node.block_comments) == [' before']
        assert _values(node.inline_comments) == [' after']
        assert node.value[0].block_comments == []

    def test_flow_mapping_value_takes_inline_comment(self):
        """An inline comment after a flow value belongs to the value."""
        node = compose(single(
            map_start(flow=True), scalar('a'), scalar('b'), inline(' on b'),
            map_end()), options=WITH_COMMENTS)
        assert _values(node.value[0][1].inline_comments) == [' on b']
        assert node.inline_comments == []

    def test_block_mapping_leading_comment_goes_to_first_key(self):
        """Block collections leave their leading comments to the first child."""
        node = compose(single(
            comment(' top'),
            map_start(), scalar('a'), scalar('b'), map_end()), options=WITH_COMMENTS)
        assert node.block_comments is None
        assert _values(node.value[0][0].block_comments) == [' top']

    def test_comment_before_sequence_end_is_not_a_child(self):
        """A comment right before the closing event does not add a child."""
        node = compose(single(
            seq_start(), scalar('a'), comment(' tail'), seq_end()),
            options=WITH_COMMENTS)
        assert len(node.value) == 1
        assert _values(node.end_comments) == [' tail']

    def test_comment_before_mapping_end_is_not_a_child(self):
        """Same for mappings."""
        node = compose(single(
            map_start(), scalar('a'), scalar('b'), comment(' tail'), map_end()),
            options=WITH_COMMENTS)
        assert len(node.value) == 1

    def test_document_end_comments(self):
        """Comments after the root node become its end comments."""
        node = compose(single(scalar('x'), comment(' end'), comment(' more')),
                       options=WITH_COMMENTS)
        assert _values(node.end_comments) == [' end', ' more']

    def test_comments_dropped_when_disabled(self):
        """Without process_comments comment events never reach the composer."""
        node = compose(single(
            map_start(),
            comment(' leading'),
            scalar('k'), scalar('v'), inline(' trailing'),
            map_end()))
        key, value = node.value[0]
        assert key.block_comments == []
        assert value.inline_comments == []
        assert node.end_comments is None

    def test_comments_between_documents(self):
        """Comments between documents lead the next document's first node."""
        events = stream(
            document(scalar('one')),
            [comment(' second')],
            document(scalar('two')))
        loader = Loader(events, options=WITH_COMMENTS)
        assert loader.check_node()
        loader.get_node()
        assert loader.check_node()
        node = loader.get_node()
        assert _values(node.block_comments) == [' second']
