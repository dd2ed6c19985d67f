"""
Save payload encoding.

The service expects form-encoded bodies with bracket notation for nested
data, e.g. ``{"prefs": {"theme": "dark"}}`` becomes ``prefs[theme]=dark``
and ``{"tags": ["a", "b"]}`` becomes ``tags[]=a&tags[]=b``. Mappings are
flattened into (key, value) pairs and handed to requests, which urlencodes
them and sets the form Content-Type. str and bytes bodies are sent as-is.
"""

from typing import Any, List, Mapping, Tuple, Union

from nls.exceptions import InvalidPayloadError

Pairs = List[Tuple[str, str]]


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _flatten(prefix: str, value: Any, pairs: Pairs) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            # Nested containers need an explicit index to stay grouped
            inner = f"{prefix}[{index}]" if _is_container(item) else f"{prefix}[]"
            _flatten(inner, item, pairs)
    else:
        pairs.append((prefix, _scalar(value)))


def encode_payload(payload: Any) -> Union[None, str, bytes, Pairs]:
    """Turn a save payload into something requests sends verbatim as ``data``.

    Raises:
        InvalidPayloadError: For top-level sequences that are not
            (key, value) pairs, and for objects with no form representation
    """
    if payload is None or isinstance(payload, (str, bytes)):
        return payload

    if isinstance(payload, Mapping):
        pairs: Pairs = []
        for key, value in payload.items():
            _flatten(str(key), value, pairs)
        return pairs

    if isinstance(payload, (list, tuple)):
        if all(isinstance(item, tuple) and len(item) == 2 for item in payload):
            pairs = []
            for key, value in payload:
                _flatten(str(key), value, pairs)
            return pairs
        raise InvalidPayloadError(payload, "top-level sequences must contain (key, value) pairs")

    if isinstance(payload, (bool, int, float)):
        return _scalar(payload)

    raise InvalidPayloadError(payload, f"{type(payload).__name__} has no form encoding")
