"""
Helm chart generators package
Modular generators for creating Helm charts from normalized manifests
"""
from .chart_generator import ChartGenerator
from .metadata_generator import (
    MetadataGenerator,
    render_chart_yaml,
    render_helpers,
    render_notes,
    render_helmignore
)
from .values_generator import ValuesGenerator
from .default_templates import generate_default_templates
from .template_processor import TemplateKind, classify_template, process_template
from .line_processors import (
    process_deployment_line,
    process_configmap_line,
    process_deployment_template,
    process_configmap_template
)
from .utils import write_file, wrap_with_guard

__all__ = [
    'ChartGenerator',
    'MetadataGenerator',
    'render_chart_yaml',
    'render_helpers',
    'render_notes',
    'render_helmignore',
    'ValuesGenerator',
    'generate_default_templates',
    'TemplateKind',
    'classify_template',
    'process_template',
    'process_deployment_line',
    'process_configmap_line',
    'process_deployment_template',
    'process_configmap_template',
    'write_file',
    'wrap_with_guard',
]
