"""
Values Generator Module

Generates the values.yaml file backing every parameter reference used by the
chart templates.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from ..config import ChartOptions
from ..utils import OrderedDumper
from .metadata_generator import CHART_DESCRIPTION
from .utils import write_file


class ValuesGenerator:
    """Generates values.yaml file for Helm chart"""

    def __init__(self, options: ChartOptions, output_dir: Path):
        self.options = options
        self.output_dir = output_dir

    def generate(self):
        """Generate values.yaml file"""
        content = self._generate_header() + self.render_values()
        write_file(self.output_dir / 'values.yaml', content, 'values.yaml')

    def render_values(self) -> str:
        """Dump the values dictionary as YAML (without header)"""
        return yaml.dump(
            self._build_values(),
            Dumper=OrderedDumper,
            default_flow_style=False,
            sort_keys=False,
            width=120,
            allow_unicode=True
        )

    def _build_values(self) -> Dict[str, Any]:
        """Build the complete values dictionary"""
        values = {
            'replicaCount': 1,
            'image': self._build_image_values(),
            'imagePullSecrets': [],
            'nameOverride': '',
            'fullnameOverride': '',
            'agent': self._build_agent_values(),
            'workerServiceAccount': {
                'create': True,
                'annotations': {},
                'name': '',
            },
            'serviceAccount': {
                'create': True,
                'annotations': {},
                'name': '',
            },
            'rbac': {
                'create': True,
            },
            'podTemplate': {
                'workerPod': '{}',
            },
            'service': {
                'type': 'ClusterIP',
                'port': 8080,
                'prometheus': {
                    'scrape': 'true',
                    'path': '/healthz',
                },
            },
            'serviceMonitor': {
                'enabled': False,
                'interval': '30s',
                'path': '/healthz',
            },
            'livenessProbe': self._build_probe_values(initial_delay=30),
            'readinessProbe': self._build_probe_values(initial_delay=5),
        }

        # Pod-level overrides rendered with toYaml; empty by default
        for key in ['podSecurityContext', 'securityContext', 'resources', 'nodeSelector']:
            values[key] = {}
        values['tolerations'] = []
        values['affinity'] = {}
        values['initContainers'] = []
        values['sidecars'] = []
        values['podAnnotations'] = {}
        values['podLabels'] = {}

        values['deploymentStrategy'] = {
            'type': 'RollingUpdate',
            'rollingUpdate': {
                'maxSurge': '25%',
                'maxUnavailable': '25%',
            },
        }
        values['terminationGracePeriodSeconds'] = 300
        return values

    def _build_image_values(self) -> Dict[str, Any]:
        # Empty tag falls back to .Chart.AppVersion in chart.imageName
        return {
            'registry': '',
            'repository': 'pulumi/customer-managed-workflow-agent',
            'pullPolicy': 'IfNotPresent',
            'tag': '',
        }

    def _build_agent_values(self) -> Dict[str, Any]:
        return {
            'serviceUrl': 'https://api.pulumi.com',
            'token': '',
            'existingSecretName': '',
            'deployTarget': 'kubernetes',
            'sharedVolumeDirectory': '/mnt/work',
            'numCpus': '',
            'memQuantity': '',
            'extraEnvVars': [],
        }

    def _build_probe_values(self, initial_delay: int) -> Dict[str, Any]:
        return {
            'enabled': False,
            'initialDelaySeconds': initial_delay,
            'periodSeconds': 10,
        }

    def _generate_header(self) -> str:
        """Generate header comment for values.yaml"""
        chart_name = self.options.chart_name

        return f"""# Default values for {chart_name}
# This is a YAML-formatted file.
# Declare variables to be passed into your templates.

# {CHART_DESCRIPTION}

# agent.token (or agent.existingSecretName) is required.
# image.tag defaults to the chart appVersion; image.registry is optional.
# workerServiceAccount.name defaults to "<fullname>-worker".

"""
