"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return ``data`` with every key converted to a string.

    YAML 1.1 turns keys such as ``yes``, ``no``, ``on`` and ``off`` into
    booleans and bare numbers into ints. Island names must stay strings, so
    boolean keys become "True"/"False" and everything else goes through str().

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 7: "b", "c": "c"})
        {'True': 'a', '7': 'b', 'c': 'c'}
    """
    normalized = {}
    for key, value in data.items():
        if isinstance(key, bool):
            key = str(key)
        normalized[str(key)] = value
    return normalized
