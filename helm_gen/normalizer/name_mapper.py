"""
Name Mapper Module

Builds the rename map for Pulumi auto-named resources, resolves the
ServiceAccount name collision, and rewrites every reference to a renamed
resource throughout the document set.
"""

import re
from typing import Any, Dict, List

from ..constants import (
    AUTONAMED_ANNOTATION,
    HASH_SUFFIX_PATTERN,
    PRIMARY_LABEL_KEY,
    PRIMARY_LABEL_VALUE,
    WORKER_SERVICE_ACCOUNT_NAME,
)
from ..logger import log_debug, log_warning
from ..utils import get_map, get_str

HASH_SUFFIX_RE = re.compile(HASH_SUFFIX_PATTERN)


def strip_hash_suffix(name: str) -> str:
    """Remove a trailing '-xxxxxxxx' hex suffix, e.g. 'agent-e17e131b' -> 'agent'"""
    return HASH_SUFFIX_RE.sub('', name)


def build_name_map(docs: List[Dict[str, Any]]) -> Dict[str, str]:
    """Map hashed names of auto-named resources to their clean names

    Only resources annotated with pulumi.com/autonamed: "true" whose name
    ends in an 8 character hex suffix are mapped.

    Args:
        docs: Resource documents

    Returns:
        Dict of original name -> clean name
    """
    name_map = {}
    for doc in docs:
        meta = get_map(doc, 'metadata')
        if meta is None:
            continue
        name = get_str(meta, 'name')
        if not name:
            continue
        annotations = get_map(meta, 'annotations')
        if annotations is None:
            continue
        if get_str(annotations, AUTONAMED_ANNOTATION) != 'true':
            continue

        clean_name = strip_hash_suffix(name)
        if clean_name != name:
            name_map[name] = clean_name
    return name_map


def _has_primary_label(meta: Dict[str, Any]) -> bool:
    labels = get_map(meta, 'labels')
    return labels is not None and get_str(labels, PRIMARY_LABEL_KEY) == PRIMARY_LABEL_VALUE


def disambiguate_service_accounts(docs: List[Dict[str, Any]], name_map: Dict[str, str]) -> None:
    """Resolve ServiceAccounts that would share a clean name after hash stripping

    Pulumi renders both the agent and the worker ServiceAccount from the same
    base name. The one labeled app.kubernetes.io/name:
    customer-managed-workflow-agent keeps the clean name; the other is mapped
    to 'worker-service-account'. Extra unlabeled accounts in the same group
    get numbered names ('worker-service-account-2', ...). Groups with no
    labeled account are left untouched.

    Args:
        docs: Resource documents
        name_map: Rename map, updated in place
    """
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for doc in docs:
        if get_str(doc, 'kind') != 'ServiceAccount':
            continue
        meta = get_map(doc, 'metadata')
        if meta is None:
            continue
        name = get_str(meta, 'name')
        if not name:
            continue
        clean_name = name_map.get(name, name)
        groups.setdefault(clean_name, []).append({
            'name': name,
            'primary': _has_primary_label(meta),
        })

    for clean_name, members in groups.items():
        if len(members) < 2:
            continue

        original_names = ', '.join(m['name'] for m in members)
        primaries = [m for m in members if m['primary']]
        if not primaries:
            log_warning(
                f"ServiceAccounts {original_names} all map to '{clean_name}' and none is labeled "
                f"{PRIMARY_LABEL_KEY}={PRIMARY_LABEL_VALUE}; leaving their names unchanged"
            )
            continue
        if len(primaries) > 1:
            log_warning(f"ServiceAccounts {original_names} have more than one primary-labeled account")

        others = [m for m in members if not m['primary']]
        if len(others) > 1:
            log_warning(
                f"{len(others)} unlabeled ServiceAccounts collide on '{clean_name}'; "
                f"numbering worker names"
            )
        for index, member in enumerate(others):
            worker_name = WORKER_SERVICE_ACCOUNT_NAME if index == 0 else f'{WORKER_SERVICE_ACCOUNT_NAME}-{index + 1}'
            name_map[member['name']] = worker_name
            log_debug(f"ServiceAccount {member['name']} -> {worker_name}")


def replace_names(value: Any, name_map: Dict[str, str]) -> Any:
    """Recursively replace every string equal to a rename map key

    Mappings and lists are updated in place; mapping keys are never rewritten.
    """
    if isinstance(value, dict):
        for key, item in value.items():
            value[key] = replace_names(item, name_map)
        return value
    if isinstance(value, list):
        for index, item in enumerate(value):
            value[index] = replace_names(item, name_map)
        return value
    if isinstance(value, str):
        return name_map.get(value, value)
    return value


def apply_name_map(doc: Dict[str, Any], name_map: Dict[str, str]) -> None:
    """Replace all old names with new names throughout a resource"""
    if not name_map:
        return
    replace_names(doc, name_map)
