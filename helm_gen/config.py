"""
Run configuration for the helm-gen pipeline
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_CHART_NAME, DEFAULT_CHART_VERSION
from .errors import ConfigurationError


@dataclass
class ChartOptions:
    """Options shared by every pipeline stage.

    Attributes:
        input_dir: Directory containing Pulumi rendered YAML manifests
        output_dir: Directory the Helm chart is written to
        chart_name: Helm chart name (also the helmify chart directory name)
        chart_version: Chart version written to Chart.yaml
        app_version: Application version, defaults to chart_version
    """

    input_dir: Path
    output_dir: Path
    chart_name: str = DEFAULT_CHART_NAME
    chart_version: str = DEFAULT_CHART_VERSION
    app_version: Optional[str] = None

    def __post_init__(self):
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)
        if not self.app_version:
            self.app_version = self.chart_version

    def validate(self):
        """Check the options before any stage runs

        Raises:
            ConfigurationError: If a directory or chart field is unusable
        """
        if not self.input_dir.exists():
            raise ConfigurationError(f"Input directory not found: {self.input_dir}")
        if not self.input_dir.is_dir():
            raise ConfigurationError(f"Input path is not a directory: {self.input_dir}")
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ConfigurationError(f"Output path exists and is not a directory: {self.output_dir}")
        if not self.chart_name:
            raise ConfigurationError("Chart name must not be empty")
        if not self.chart_version:
            raise ConfigurationError("Chart version must not be empty")
