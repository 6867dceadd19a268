"""
Utilities Module

YAML dumping and safe accessors for loosely typed manifest dicts.
"""

from typing import Any, Dict, List, Optional

import yaml

from .constants import YAML_SEPARATOR


# Custom YAML representer to handle dict in order
class OrderedDumper(yaml.SafeDumper):
    """YAML dumper that preserves dictionary order"""
    pass


def dict_representer(dumper, data):
    """Represent dict as ordered mapping"""
    return dumper.represent_mapping(
        yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
        data.items()
    )


# Register the representer
OrderedDumper.add_representer(dict, dict_representer)


def dump_yaml(data: Any) -> str:
    """Dump a value as block-style YAML, keeping key order and long lines intact"""
    return yaml.dump(
        data,
        Dumper=OrderedDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float('inf')
    )


def dump_multi_doc(docs: List[Dict[str, Any]]) -> str:
    """Serialize documents into a single multi-document YAML stream.

    Args:
        docs: Documents in the order they should appear

    Returns:
        YAML text with documents joined by the '---' separator
    """
    return YAML_SEPARATOR.join(dump_yaml(doc) for doc in docs)


def get_str(m: Dict[str, Any], key: str) -> str:
    """Return m[key] if it is a string, otherwise an empty string"""
    value = m.get(key)
    return value if isinstance(value, str) else ''


def get_map(m: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Return m[key] if it is a mapping, otherwise None"""
    value = m.get(key)
    return value if isinstance(value, dict) else None


def get_nested_str(m: Dict[str, Any], *keys: str) -> str:
    """Follow nested mapping keys and return the final string value

    e.g., get_nested_str(doc, 'metadata', 'name')
    """
    current = m
    for key in keys[:-1]:
        current = get_map(current, key)
        if current is None:
            return ''
    return get_str(current, keys[-1])
