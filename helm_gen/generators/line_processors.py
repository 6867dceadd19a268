"""
Line Processors Module

Replaces hardcoded values in helmify-generated Deployment and ConfigMap
templates with Helm values references. Processing is strictly line by line:
one input line always produces exactly one output line.
"""

from typing import List, NamedTuple, Optional, Tuple

from ..constants import TEMPLATE_MARKER


class LineRule(NamedTuple):
    """A key token and the templated value that replaces its literal value

    Attributes:
        key: Token the line must contain, including the trailing colon
        value: Helm expression written after the key
        exclude: Optional token that disqualifies the line
    """

    key: str
    value: str
    exclude: Optional[str] = None


# Order matters: the first matching rule wins
DEPLOYMENT_RULES: Tuple[LineRule, ...] = (
    LineRule('replicas:', '{{ .Values.replicaCount }}'),
    # PULUMI_AGENT_IMAGE env entries are wired through the ConfigMap instead
    LineRule('image:', '{{ include "chart.imageName" . | quote }}', exclude='PULUMI_AGENT_IMAGE'),
    LineRule('imagePullPolicy:', '{{ .Values.image.pullPolicy }}'),
    LineRule('serviceAccountName:', '{{ include "chart.serviceAccountName" . }}'),
)

CONFIGMAP_RULES: Tuple[LineRule, ...] = (
    LineRule('PULUMI_AGENT_SERVICE_URL:', '{{ .Values.agent.serviceUrl | quote }}'),
    LineRule('PULUMI_AGENT_IMAGE:', '{{ include "chart.imageName" . | quote }}'),
    LineRule('PULUMI_AGENT_IMAGE_PULL_POLICY:', '{{ .Values.image.pullPolicy | quote }}'),
    LineRule('worker-pod.json:', '{{ .Values.podTemplate.workerPod | quote }}'),
)


def substitute_line(line: str, rules: Tuple[LineRule, ...]) -> str:
    """Apply the first matching rule to a single line

    A line matches when it contains the rule key, does not already contain a
    Helm expression, and does not contain the rule's exclude token. Everything
    before the key (indentation, list dash) is kept; the value after it is
    replaced.

    Returns:
        The substituted line, or the line unchanged if no rule matches
    """
    if TEMPLATE_MARKER in line:
        return line

    for rule in rules:
        if rule.key not in line:
            continue
        if rule.exclude and rule.exclude in line:
            continue
        prefix = line[:line.index(rule.key)]
        return f'{prefix}{rule.key} {rule.value}'
    return line


def substitute_lines(content: str, rules: Tuple[LineRule, ...]) -> str:
    lines: List[str] = content.split('\n')
    return '\n'.join(substitute_line(line, rules) for line in lines)


def process_deployment_line(line: str) -> str:
    return substitute_line(line, DEPLOYMENT_RULES)


def process_configmap_line(line: str) -> str:
    return substitute_line(line, CONFIGMAP_RULES)


def process_deployment_template(content: str) -> str:
    """Parameterize replicas, image, imagePullPolicy and serviceAccountName"""
    return substitute_lines(content, DEPLOYMENT_RULES)


def process_configmap_template(content: str) -> str:
    """Parameterize the agent service URL, image, pull policy and worker pod spec"""
    return substitute_lines(content, CONFIGMAP_RULES)
