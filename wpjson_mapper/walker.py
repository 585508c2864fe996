"""
Tree Walker Module

Decodes wp-json documents and walks them to collect endpoint paths and
href URLs.
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .errors import DecodeError


HREF_KEY = "href"


@dataclass
class Result:
    """Endpoints and href URLs extracted from one wp-json document."""

    endpoints: List[str] = field(default_factory=list)
    hrefs: List[str] = field(default_factory=list)
    target: Optional[str] = None
    api_url: Optional[str] = None


def decode_document(body: Union[bytes, str]) -> Any:
    """
    Decode a response body as JSON.

    Args:
        body: Raw response body

    Returns:
        The decoded document (dict, list or scalar)

    Raises:
        DecodeError: If the body is not valid JSON or is nested too deeply
    """
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"invalid JSON document: {e}") from e
    except RecursionError as e:
        raise DecodeError(f"JSON document nested too deeply: {e}") from e


def walk(root: Any) -> Result:
    """
    Collect endpoint paths and href URLs from a decoded document.

    Every scalar reached through object keys yields its key path, e.g.
    "/routes//wp/v2/posts/methods" for {"routes": {"/wp/v2/posts":
    {"methods": ["GET"]}}}. Array indexes are not part of the path, so
    array items share the path of their array. Values under an "href"
    key are collected as URLs and not walked further.

    The walk is pre-order and uses an explicit stack, so nesting depth is
    not bounded by the interpreter's recursion limit.

    Args:
        root: Decoded JSON document

    Returns:
        Result with endpoints and hrefs in traversal order

    Raises:
        DecodeError: If an href value is not a string
    """
    result = Result()
    # (node, path, is_href_value); children are pushed in reverse
    stack = [(root, "", False)]

    while stack:
        node, path, is_href_value = stack.pop()

        if is_href_value:
            if not isinstance(node, str):
                raise DecodeError(f"href at '{path or '/'}' is not a string: {node!r}")
            result.hrefs.append(node)
        elif isinstance(node, dict):
            for key, value in reversed(list(node.items())):
                if key == HREF_KEY:
                    stack.append((value, path, True))
                else:
                    stack.append((value, f"{path}/{key}", False))
        elif isinstance(node, list):
            for item in reversed(node):
                stack.append((item, path, False))
        elif path:
            result.endpoints.append(path)

    return result
