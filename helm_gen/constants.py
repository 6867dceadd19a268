"""Constants for helm-gen

Centralized location for hardcoded values to improve maintainability.
"""

# Pulumi annotations
PULUMI_ANNOTATION_PREFIX = 'pulumi.com/'
AUTONAMED_ANNOTATION = 'pulumi.com/autonamed'

# Pulumi appends "-" plus 8 lowercase hex characters to auto-named resources
HASH_SUFFIX_PATTERN = r'-[0-9a-f]{8}$'

# Label identifying the agent ServiceAccount when two accounts collide
PRIMARY_LABEL_KEY = 'app.kubernetes.io/name'
PRIMARY_LABEL_VALUE = 'customer-managed-workflow-agent'

# Name given to the non-primary ServiceAccount of a collision group
WORKER_SERVICE_ACCOUNT_NAME = 'worker-service-account'

YAML_SEPARATOR = '---\n'
YAML_EXTENSIONS = ('.yaml', '.yml')

# CLI defaults
DEFAULT_CHART_NAME = 'pulumi-deployment-agent'
DEFAULT_CHART_VERSION = '0.1.0'

# External transform
HELMIFY_BINARY = 'helmify'
HELMIFY_INSTALL_HINT = 'go install github.com/arttor/helmify/cmd/helmify@latest'
PREPROCESSED_FILENAME = 'all.yaml'
HELMIFY_OUTPUT_DIRNAME = 'helmify-output'

# Chart layout
TEMPLATES_DIRNAME = 'templates'
HELPERS_FILENAME = '_helpers.tpl'
NOTES_FILENAME = 'NOTES.txt'

# Files owned by the generator itself; skipped when copying helmify output
GENERATOR_OWNED_TEMPLATES = {HELPERS_FILENAME, NOTES_FILENAME}

# Conditional guards controlling whether an optional resource is rendered
SECRET_GUARD = '{{- if and .Values.agent.token (not .Values.agent.existingSecretName) }}'
RBAC_GUARD = '{{- if .Values.rbac.create }}'
WORKER_SERVICE_ACCOUNT_GUARD = '{{- if .Values.workerServiceAccount.create }}'
SERVICE_ACCOUNT_GUARD = '{{- if .Values.serviceAccount.create }}'
SERVICE_MONITOR_GUARD = '{{- if .Values.serviceMonitor.enabled }}'
GUARD_END = '{{- end }}'

# Marker of an existing Helm expression; lines containing it are left alone
TEMPLATE_MARKER = '{{'
