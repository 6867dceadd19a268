"""
Pulumi to Helm chart generator

Converts Pulumi rendered Kubernetes manifests into a parameterized Helm chart.
"""

__version__ = '0.1.0'
