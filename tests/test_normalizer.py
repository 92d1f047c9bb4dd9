"""
Tests for HTML extraction from the analysis webhook's varying reply shapes.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from content_analyzer.normalizer import extract_html


def test_top_level_html_field():
    assert extract_html({"html": "<p>x</p>"}) == "<p>x</p>"

def test_nested_array_shape():
    assert extract_html([[{"html": "<div/>"}]]) == "<div/>"

def test_array_of_objects_shape():
    assert extract_html([{"html": "<ul></ul>"}, {"html": "<ol></ol>"}]) == "<ul></ul>"

def test_nested_result_shape():
    assert extract_html({"result": {"html": "<h1>Report</h1>"}}) == "<h1>Report</h1>"

def test_top_level_html_wins_over_result():
    assert extract_html({"html": "<a/>", "result": {"html": "<b/>"}}) == "<a/>"

def test_raw_html_string_returned_unmodified():
    raw = "  <section>hi</section>"
    assert extract_html(raw) == raw

def test_nested_array_falls_through_when_inner_item_lacks_html():
    # Only the first element of each level is inspected
    assert extract_html([[{"text": "no html"}, {"html": "<i/>"}]]) is None

def test_empty_html_is_not_a_match():
    assert extract_html({"html": "", "result": {"html": "<p>fallback</p>"}}) == "<p>fallback</p>"
    assert extract_html([{"html": ""}]) is None


@pytest.mark.parametrize("payload", [
    None,
    42,
    "",
    "plain text report",
    [],
    [[]],
    [None],
    ["<p>not inspected</p>"],
    {},
    {"result": "<p>not an object</p>"},
    {"data": {"html": "<p>wrong key</p>"}},
    {"result": {"report": "<p>x</p>"}},
    {"html": {}},
    [{"html": []}],
])
def test_unrecognized_shapes_yield_none(payload):
    assert extract_html(payload) is None
