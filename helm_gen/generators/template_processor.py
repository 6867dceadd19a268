"""
Template Processor Module

Classifies helmify-generated template files by resource kind and applies the
matching post-processing: value substitution for Deployment and ConfigMap,
conditional guards for optional resources, pass-through for everything else.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..constants import (
    RBAC_GUARD,
    SECRET_GUARD,
    SERVICE_ACCOUNT_GUARD,
    SERVICE_MONITOR_GUARD,
    WORKER_SERVICE_ACCOUNT_GUARD,
)
from .line_processors import process_configmap_template, process_deployment_template
from .utils import wrap_with_guard


class TemplateKind(Enum):
    DEPLOYMENT = 'deployment'
    CONFIGMAP = 'configmap'
    SECRET = 'secret'
    SERVICE = 'service'
    SERVICE_ACCOUNT = 'serviceaccount'
    WORKER_SERVICE_ACCOUNT = 'worker-serviceaccount'
    ROLE = 'role'
    ROLE_BINDING = 'rolebinding'
    SERVICE_MONITOR = 'servicemonitor'


# Exact template file names; authoritative when the name matches
TEMPLATE_KINDS: Dict[str, TemplateKind] = {
    f'{kind.value}.yaml': kind for kind in TemplateKind
}

# Fallback for non-standard helmify file names. Checked in order, first match
# wins; every token of an entry must appear in the file name.
FALLBACK_CHAIN: Tuple[Tuple[Tuple[str, ...], TemplateKind], ...] = (
    (('deployment',), TemplateKind.DEPLOYMENT),
    (('configmap',), TemplateKind.CONFIGMAP),
    (('secret',), TemplateKind.SECRET),
    (('role', 'binding'), TemplateKind.ROLE_BINDING),
    (('role',), TemplateKind.ROLE),
    (('worker', 'serviceaccount'), TemplateKind.WORKER_SERVICE_ACCOUNT),
    (('serviceaccount',), TemplateKind.SERVICE_ACCOUNT),
    (('servicemonitor',), TemplateKind.SERVICE_MONITOR),
    (('service',), TemplateKind.SERVICE),
)


def _guarded(guard: str) -> Callable[[str], str]:
    return lambda content: wrap_with_guard(content, guard)


TEMPLATE_PROCESSORS: Dict[TemplateKind, Callable[[str], str]] = {
    TemplateKind.DEPLOYMENT: process_deployment_template,
    TemplateKind.CONFIGMAP: process_configmap_template,
    TemplateKind.SECRET: _guarded(SECRET_GUARD),
    TemplateKind.ROLE: _guarded(RBAC_GUARD),
    TemplateKind.ROLE_BINDING: _guarded(RBAC_GUARD),
    TemplateKind.WORKER_SERVICE_ACCOUNT: _guarded(WORKER_SERVICE_ACCOUNT_GUARD),
    TemplateKind.SERVICE_ACCOUNT: _guarded(SERVICE_ACCOUNT_GUARD),
    TemplateKind.SERVICE_MONITOR: _guarded(SERVICE_MONITOR_GUARD),
    # Service is always installed
    TemplateKind.SERVICE: lambda content: content,
}


def classify_template(name: str) -> Optional[TemplateKind]:
    """Determine the resource kind of a template file from its name

    Args:
        name: Template file name (e.g., 'deployment.yaml', 'my-agent-rolebinding.yaml')

    Returns:
        The TemplateKind, or None if the name is not recognized
    """
    if name in TEMPLATE_KINDS:
        return TEMPLATE_KINDS[name]

    for tokens, kind in FALLBACK_CHAIN:
        if all(token in name for token in tokens):
            return kind
    return None


def process_template(name: str, content: str) -> str:
    """Post-process a template file based on its classification

    Unrecognized files are returned unchanged.
    """
    kind = classify_template(name)
    if kind is None:
        return content
    return TEMPLATE_PROCESSORS[kind](content)
