"""
Allow-list HTML sanitizer for generated workspace pages.

Anything not on the list is removed: disallowed tags are stripped, the
contents of script-like tags are discarded, and attributes or URLs outside
the allowed set are dropped. Full documents keep their html/head/body shell.
"""

import re
from typing import Callable, Dict, List, Union
from urllib.parse import urlparse

from bleach.html5lib_shim import Filter
from bleach.sanitizer import Cleaner

ALLOWED_TAGS = [
    "html",
    "head",
    "body",
    "main",
    "section",
    "article",
    "header",
    "footer",
    "nav",
    "div",
    "span",
    "p",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "a",
    "button",
    "img",
    "form",
    "label",
    "input",
    "textarea",
]

GLOBAL_ATTRS = ["class", "id", "role", "aria-label", "aria-hidden", "data-name"]

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]
IMG_PROTOCOLS = ["http", "https"]

# Never allowed; their text must not survive as page content
DISCARD_WITH_CONTENT = frozenset(["script", "style", "noscript", "option"])

_DOCUMENT_SHELL = re.compile(r"<(?:html|body)\b", re.IGNORECASE)
_HEAD = re.compile(r"<head\b[^>]*>(.*?)</head\s*>", re.IGNORECASE | re.DOTALL)
_BODY = re.compile(r"<body\b[^>]*>(.*?)(?:</body\s*>|\Z)", re.IGNORECASE | re.DOTALL)
_SHELL_TAGS = re.compile(r"</?(?:html|head|body)\b[^>]*>", re.IGNORECASE)


def _img_attribute(tag: str, name: str, value: str) -> bool:
    if name in GLOBAL_ATTRS or name in ("alt", "width", "height"):
        return True
    if name == "src":
        scheme = urlparse(value.strip()).scheme.lower()
        return scheme == "" or scheme in IMG_PROTOCOLS
    return False


ALLOWED_ATTRIBUTES: Dict[str, Union[List[str], Callable[[str, str, str], bool]]] = {
    "*": GLOBAL_ATTRS,
    "a": ["href", "target", "rel", *GLOBAL_ATTRS],
    "img": _img_attribute,
    "input": ["type", "name", "value", "placeholder", "checked", "disabled", *GLOBAL_ATTRS],
    "textarea": ["name", "placeholder", "rows", "cols", *GLOBAL_ATTRS],
    "button": ["type", "disabled", *GLOBAL_ATTRS],
    "form": ["action", "method", *GLOBAL_ATTRS],
    "label": ["for", *GLOBAL_ATTRS],
}


class DiscardContentFilter(Filter):
    """Drop script-like elements together with everything inside them."""

    def __iter__(self):
        depth = 0
        for token in Filter.__iter__(self):
            if token.get("name") in DISCARD_WITH_CONTENT:
                if token["type"] == "StartTag":
                    depth += 1
                elif token["type"] == "EndTag":
                    depth = max(0, depth - 1)
                continue
            if depth:
                continue
            yield token


def _clean_fragment(fragment: str) -> str:
    # The discard tags pass the sanitizer only so the filter can see them.
    cleaner = Cleaner(
        tags=[*ALLOWED_TAGS, *DISCARD_WITH_CONTENT],
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[DiscardContentFilter],
    )
    return cleaner.clean(fragment)


def _clean_document(value: str) -> str:
    head = _HEAD.search(value)
    body = _BODY.search(value)

    head_html = head.group(1) if head else ""
    if body:
        body_html = body.group(1)
    else:
        body_html = _SHELL_TAGS.sub("", _HEAD.sub("", value))

    return (
        f"<html><head>{_clean_fragment(head_html)}</head>"
        f"<body>{_clean_fragment(body_html)}</body></html>"
    )


def sanitize_workspace_html(value: str) -> str:
    """
    Restrict HTML to the workspace allow-list.

    Fragments are cleaned as they are. Input with an <html> or <body> tag is
    treated as a document: head and body are cleaned separately and wrapped
    in a bare html/head/body shell.

    Args:
        value: Raw HTML (possibly malformed)

    Returns:
        Safe HTML; malformed input yields an empty or partial result
    """
    if not value:
        return ""

    if _DOCUMENT_SHELL.search(value):
        return _clean_document(value)
    return _clean_fragment(value)
