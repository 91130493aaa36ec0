"""Tests for the structural scans over buffer text."""

import pytest

from svgsense.buffer import CancellationSignal, StringBuffer
from svgsense.completion.resolver import (
    attribute_at_boundary,
    find_enclosing_attribute,
    find_enclosing_start_tag,
    find_parent_element,
    find_preceding_tag,
)
from svgsense.completion.types import TagMatch
from svgsense.exceptions import CompletionCancelled


def at_cursor(marked: str):
    """Buffer and position for text with the cursor marked by ``|``."""
    offset = marked.index("|")
    buffer = StringBuffer(marked[:offset] + marked[offset + 1 :])
    return buffer, buffer.position_at(offset)


class TestFindEnclosingStartTag:
    def test_inside_start_tag(self):
        tag = find_enclosing_start_tag(*at_cursor('<svg>\n  <rect x="1" |/>'))
        assert tag == TagMatch(tag_name="rect", attributes_text=' x="1" ')

    def test_directly_after_tag_name(self):
        tag = find_enclosing_start_tag(*at_cursor("<svg>\n  <circle |"))
        assert tag.tag_name == "circle"
        assert tag.attributes_text == " "

    def test_start_tag_spanning_lines(self):
        tag = find_enclosing_start_tag(*at_cursor('<rect\n    x="1"\n    y="2" |'))
        assert tag.tag_name == "rect"
        assert ' y="2"' in tag.attributes_text

    def test_namespaced_name(self):
        tag = find_enclosing_start_tag(*at_cursor("<svg:rect |"))
        assert tag.tag_name == "svg:rect"

    @pytest.mark.parametrize(
        "marked",
        [
            "|",
            "plain text |",
            "<g> |",
            '<g>\n  <rect x="1" /> |',
            "<g></g |",
            "<!-- note |",
            "< |",
        ],
    )
    def test_not_inside_start_tag(self, marked):
        assert find_enclosing_start_tag(*at_cursor(marked)) is None


class TestFindEnclosingAttribute:
    @pytest.mark.parametrize(
        "marked, expected",
        [
            ('<rect fill="|', "fill"),
            ("<rect fill=|", "fill"),
            ('<rect x="1" fill = "|', "fill"),
            ('<use xlink:href="|', "xlink:href"),
            ('<line stroke-linecap="|"', "stroke-linecap"),
        ],
    )
    def test_attribute_at_boundary(self, marked, expected):
        match = find_enclosing_attribute(*at_cursor(marked))
        assert match.attribute_name == expected

    def test_tag_name_carried(self):
        match = find_enclosing_attribute(*at_cursor('<svg>\n<animate fill="|'))
        assert match.tag_name == "animate"

    @pytest.mark.parametrize(
        "marked",
        [
            '<rect fill="red"|',
            '<rect fill=""|',
            '<rect fill="red" |',
            '<g fill="red">"|',
            '"|',
        ],
    )
    def test_no_assignment_at_boundary(self, marked):
        assert find_enclosing_attribute(*at_cursor(marked)) is None

    def test_from_tag_match(self):
        tag = TagMatch(tag_name="rect", attributes_text=' class="a" fill="')
        assert attribute_at_boundary(tag).attribute_name == "fill"
        assert attribute_at_boundary(TagMatch("rect", ' class="a"')) is None


class TestFindParentElement:
    def test_sibling_closed_tags_do_not_leak(self):
        ancestor = find_parent_element(*at_cursor("<a><b></b><c>|</c>"))
        assert ancestor.tag_name == "c"

    def test_self_closing_tags_ignored(self):
        ancestor = find_parent_element(*at_cursor('<svg>\n  <g>\n    <rect x="1" />\n    <circle/>\n    |'))
        assert ancestor.tag_name == "g"

    def test_document_root(self):
        assert find_parent_element(*at_cursor("|")) is None
        assert find_parent_element(*at_cursor("<svg></svg>\n|")) is None

    def test_comments_and_declarations_ignored(self):
        marked = '<?xml version="1.0"?>\n<!DOCTYPE svg>\n<svg>\n<!-- <g> -->\n<![CDATA[ <text> ]]>\n|'
        assert find_parent_element(*at_cursor(marked)).tag_name == "svg"

    def test_gt_inside_attribute_value(self):
        ancestor = find_parent_element(*at_cursor('<svg><g data-x="a>b"><title>t</title>|'))
        assert ancestor.tag_name == "g"

    def test_unbalanced_start_tags_stay_open(self):
        ancestor = find_parent_element(*at_cursor("<svg><g><text>|"))
        assert ancestor.tag_name == "text"

    def test_stray_end_tag_ignored(self):
        assert find_parent_element(*at_cursor("<svg></g>|")).tag_name == "svg"

    def test_end_tag_closes_unclosed_children(self):
        assert find_parent_element(*at_cursor("<svg><g><text></g>|")).tag_name == "svg"

    def test_tag_being_typed_not_counted(self):
        assert find_parent_element(*at_cursor("<svg>\n<g>\n<rect |")).tag_name == "g"

    def test_cancelled_scan_raises(self):
        signal = CancellationSignal()
        signal.cancel()
        buffer, position = at_cursor("<svg><g>|")
        with pytest.raises(CompletionCancelled):
            find_parent_element(buffer, position, signal, check_interval=1)

    def test_zero_interval_polls_every_tag(self):
        buffer, position = at_cursor("<svg><g>|")
        assert find_parent_element(buffer, position, CancellationSignal(), check_interval=0).tag_name == "g"

        signal = CancellationSignal()
        signal.cancel()
        with pytest.raises(CompletionCancelled):
            find_parent_element(buffer, position, signal, check_interval=0)

    def test_live_token_does_not_interrupt(self):
        buffer, position = at_cursor("<svg>" + "<g></g>" * 200 + "<text>|")
        ancestor = find_parent_element(buffer, position, CancellationSignal(), check_interval=5)
        assert ancestor.tag_name == "text"


class TestFindPrecedingTag:
    @pytest.mark.parametrize(
        "marked",
        [
            "|",
            "<|",
            "|<svg>",
            '<?xml version="1.0"?>\n<|',
            "<!-- draft -->\n<|",
            "<!-- <g> -->\n<|",
            "<![CDATA[ <text> ]]>\n<|",
            "<!-- <g>\n<|",
        ],
    )
    def test_no_preceding_tag(self, marked):
        assert find_preceding_tag(*at_cursor(marked)) is None

    def test_last_start_tag(self):
        tag = find_preceding_tag(*at_cursor("<svg>\n  <g>\n  <|"))
        assert tag.tag_name == "g"

    def test_last_end_tag(self):
        tag = find_preceding_tag(*at_cursor("<svg>\n  <g></g>\n  <|"))
        assert tag.tag_name == "g"

    def test_unfinished_start_tag(self):
        assert find_preceding_tag(*at_cursor("<svg\n<|")).tag_name == "svg"

    def test_commented_tag_after_content(self):
        assert find_preceding_tag(*at_cursor("<svg>\n<!-- <g> -->\n<|")).tag_name == "svg"
