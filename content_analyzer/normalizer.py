"""
HTML extraction for the analysis webhook's loosely shaped replies.

The automation behind the webhook does not commit to one output format. Each
known shape gets a small matcher; `extract_html` tries them in order and the
first hit wins. An `html` value counts only when it is truthy by Python rules,
so empty strings, lists and dicts are "not found".
"""
from typing import Any, Callable, List, Optional


def _html_of(item: Any) -> Optional[Any]:
    """Truthy `html` value of a mapping, else None."""
    if isinstance(item, dict) and item.get("html"):
        return item["html"]
    return None


def _match_sequence(data: Any) -> Optional[Any]:
    # [[{"html": ...}]] first, then [{"html": ...}]
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if isinstance(first, list) and first:
        html = _html_of(first[0])
        if html:
            return html
    return _html_of(first)


def _match_mapping(data: Any) -> Optional[Any]:
    # {"html": ...} first, then {"result": {"html": ...}}
    if not isinstance(data, dict):
        return None
    return _html_of(data) or _html_of(data.get("result"))


def _match_raw_html(data: Any) -> Optional[str]:
    if isinstance(data, str) and data.strip().startswith("<"):
        return data
    return None


SHAPE_MATCHERS: List[Callable[[Any], Optional[Any]]] = [
    _match_sequence,
    _match_mapping,
    _match_raw_html,
]


def extract_html(data: Any) -> Optional[str]:
    """
    Locate the report HTML inside a decoded webhook payload.

    Args:
        data: Any decoded JSON value, or a raw string.

    Returns:
        The HTML fragment, or None when no recognized shape carries one.
    """
    for matcher in SHAPE_MATCHERS:
        html = matcher(data)
        if html:
            return html
    return None
