"""Flatten/unflatten codec for key-based translation documents.

Nested objects become flat mappings keyed by dot-joined paths. Arrays of
strings are encoded into a single string joined with ``ARRAY_SEPARATOR`` so
they can be translated as one leaf; splitting them back is left to the
caller, who knows which keys were arrays. Any other array (objects, numbers,
mixed) is kept verbatim as a leaf and is never translated.

The separator has to survive machine translation untouched for the split to
restore the original element count. Nothing guarantees that.
"""

from typing import Any, Dict, Iterable, Mapping, Tuple

PATH_SEPARATOR = "."
ARRAY_SEPARATOR = " <sep /> "


def is_text_array(value: Any) -> bool:
    """True for a list whose elements are all strings (including the empty list)."""
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def encode_array(values: Iterable[str]) -> str:
    """Join string array elements into one string."""
    return ARRAY_SEPARATOR.join(values)


def decode_array(value: Any) -> Any:
    """Split a string produced by encode_array back into a list.

    Non-string values are returned unchanged. The empty string decodes to an
    empty list.
    """
    if not isinstance(value, str):
        return value
    if value == "":
        return []
    return value.split(ARRAY_SEPARATOR)


def flatten(nested: Mapping[str, Any]) -> Tuple[Dict[str, Any], frozenset]:
    """Flatten a nested document into dot-path keys.

    Args:
        nested: Parsed key-based JSON object.

    Returns:
        Tuple of (flat mapping in document order, frozenset of flat keys whose
        leaf was an array of strings and is now an encoded string).
    """
    flat: Dict[str, Any] = {}
    array_keys = set()

    def walk(node: Mapping[str, Any], prefix: str) -> None:
        for key, value in node.items():
            path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
            if isinstance(value, dict):
                walk(value, path)
            elif is_text_array(value):
                flat[path] = encode_array(value)
                array_keys.add(path)
            else:
                flat[path] = value

    walk(nested, "")
    return flat, frozenset(array_keys)


def unflatten(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild a nested document from dot-path keys.

    Encoded arrays stay strings; see decode_arrays.
    """
    root: Dict[str, Any] = {}
    for key, value in flat.items():
        parts = key.split(PATH_SEPARATOR)
        node = root
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[parts[-1]] = value
    return root


def decode_arrays(
    flat: Mapping[str, Any], array_keys: Iterable[str]
) -> Dict[str, Any]:
    """Return a copy of flat with the given keys split back into lists."""
    decoded = dict(flat)
    for key in array_keys:
        if key in decoded:
            decoded[key] = decode_array(decoded[key])
    return decoded


def to_document(
    flat: Mapping[str, Any], array_keys: Iterable[str]
) -> Dict[str, Any]:
    """Inverse of flatten: decode array leaves, then re-nest."""
    return unflatten(decode_arrays(flat, array_keys))
