# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Pointer (RFC 6901) helpers.

Pointers may be written plain (``/definitions/a``) or as a URI fragment
(``#/definitions/a``); in the fragment form percent-escapes are decoded.
``""`` and ``"#"`` both address the whole document.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Union
from urllib.parse import unquote

from ..models.json_value import is_json_array, is_json_object


JsonPointer = str

_ARRAY_INDEX_RE = re.compile(r"0|[1-9][0-9]*")


class PointerSyntaxError(ValueError):
    """Raised for a string that is not a JSON pointer."""


class PointerLookupError(LookupError):
    """Raised when a pointer segment does not exist in the document."""

    def __init__(self, message: str, segment: str, depth: int):
        super().__init__(message)
        self.segment = segment
        self.depth = depth


def escape_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def join_pointer(base: Optional[JsonPointer], token: Union[str, int]) -> JsonPointer:
    token = escape_token(str(token))
    if not base:
        return f"/{token}"
    return f"{base}/{token}"


def split_pointer(pointer: JsonPointer) -> List[str]:
    """Split a pointer into unescaped reference tokens."""
    if not isinstance(pointer, str):
        raise PointerSyntaxError(f"Pointer must be a string, got {type(pointer).__name__}")

    body = pointer
    if body.startswith("#"):
        body = unquote(body[1:])

    if body == "":
        return []
    if not body.startswith("/"):
        raise PointerSyntaxError(f"Invalid JSON pointer '{pointer}': must be empty or start with '/'")
    return [unescape_token(token) for token in body[1:].split("/")]


def resolve_pointer(document: Any, pointer: JsonPointer) -> Any:
    """Return the node of *document* addressed by *pointer*.

    Raises:
        PointerSyntaxError: If *pointer* is not a valid pointer.
        PointerLookupError: If a segment is missing.
    """
    target = document
    for depth, token in enumerate(split_pointer(pointer)):
        if is_json_object(target):
            if token not in target:
                raise PointerLookupError(
                    f"Pointer '{pointer}' segment '{token}' missing from document", token, depth
                )
            target = target[token]
        elif is_json_array(target):
            if not _ARRAY_INDEX_RE.fullmatch(token) or int(token) >= len(target):
                raise PointerLookupError(
                    f"Pointer '{pointer}' segment '{token}' is not a valid index into an array "
                    f"of length {len(target)}",
                    token,
                    depth,
                )
            target = target[int(token)]
        else:
            raise PointerLookupError(
                f"Pointer '{pointer}' segment '{token}' descends into a scalar value", token, depth
            )
    return target


def normalize_pointer(pointer: JsonPointer) -> JsonPointer:
    """Return the plain (non-fragment) form of *pointer*, e.g. ``#/a%20b`` -> ``/a b``."""
    return "".join(f"/{escape_token(token)}" for token in split_pointer(pointer))
