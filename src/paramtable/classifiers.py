"""Leaf/branch classification and leaf payload extraction.

A node is a leaf when it is not a mapping, or when it is a mapping whose key
set matches the leaf signature exactly: every key in LEAF_REQUIRED_KEYS and
nothing outside LEAF_REQUIRED_KEYS | LEAF_OPTIONAL_KEYS.  Any other mapping
is a branch, and its keys are laid out as ordinary children.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from paramtable.config import LEAF_OPTIONAL_KEYS, LEAF_REQUIRED_KEYS
from paramtable.errors import StructureError
from paramtable.schema import LeafDetail

_LEAF_ALLOWED_KEYS = LEAF_REQUIRED_KEYS | LEAF_OPTIONAL_KEYS

# repr() switches to exponent notation from 1e16 on
_PLAIN_FLOAT_LIMIT = 1e16


def is_leaf(node: Any) -> bool:
    """Return True if the node is a terminal entry rather than a group of parameters."""
    if not isinstance(node, Mapping):
        return True
    keys = set(node.keys())
    return LEAF_REQUIRED_KEYS <= keys <= _LEAF_ALLOWED_KEYS


def is_branch(node: Any) -> bool:
    """Return True if the node's children must be laid out recursively."""
    return not is_leaf(node)


def stringify(value: Any) -> str:
    """Render a JSON scalar the way it reads in the source document."""
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Whole numbers print without a fraction until they need an exponent
        if value.is_integer() and abs(value) < _PLAIN_FLOAT_LIMIT:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    raise StructureError(f"Cannot render a {type(value).__name__} as a scalar value: {value!r}")


def _text(value: Any) -> str:
    """Like stringify, but a null title or description reads as absent."""
    return "" if value is None else stringify(value)


def _stringify_options(options: Any) -> list[str]:
    """Normalise an options payload to a list of strings, keeping its order."""
    if isinstance(options, (list, tuple)):
        return [stringify(option) for option in options]
    return [stringify(options)]


def leaf_detail(key: str, node: Any) -> LeafDetail:
    """Extract the header/description/defaultValue/options fields of a leaf.

    Scalars become the header, null becomes an empty detail, and a bare
    sequence becomes the options list with the key as its header.
    """
    if isinstance(node, Mapping):
        fields: dict[str, Any] = {
            "header": _text(node["header"]),
            "description": _text(node["description"]),
        }
        if "defaultValue" in node:
            fields["defaultValue"] = stringify(node["defaultValue"])
        if "options" in node:
            fields["options"] = _stringify_options(node["options"])
    elif node is None:
        fields = {}
    elif isinstance(node, (list, tuple)):
        fields = {"header": key, "options": _stringify_options(node)}
    else:
        fields = {"header": stringify(node)}

    try:
        return LeafDetail(**fields)
    except ValidationError as exc:
        raise StructureError(f"Invalid leaf payload for '{key}': {exc}") from exc
