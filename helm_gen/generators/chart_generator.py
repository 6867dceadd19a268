"""
Chart Generator Module

Generates the final Helm chart: static scaffold files plus one template per
resource kind, taken from helmify output when available or from built-in
defaults otherwise.
"""

from pathlib import Path
from typing import Dict, Optional

from ..config import ChartOptions
from ..constants import GENERATOR_OWNED_TEMPLATES, TEMPLATES_DIRNAME
from ..errors import WriteError
from ..logger import log_debug, log_info
from .default_templates import generate_default_templates
from .metadata_generator import MetadataGenerator
from .template_processor import classify_template, process_template
from .utils import write_file
from .values_generator import ValuesGenerator


class ChartGenerator:
    """Generates Helm chart files from helmify output or built-in defaults"""

    def __init__(self, options: ChartOptions, input_dir: Optional[Path] = None):
        """Initialize ChartGenerator

        Args:
            options: Chart options (output directory, name, versions)
            input_dir: helmify chart directory (<dir>/<chart-name>), or None
                to generate every template from built-in defaults
        """
        self.options = options
        self.input_dir = Path(input_dir) if input_dir else None
        self.output_dir = options.output_dir
        self.templates_dir = self.output_dir / TEMPLATES_DIRNAME

        self.metadata_gen = MetadataGenerator(options, self.output_dir)
        self.values_gen = ValuesGenerator(options, self.output_dir)

    def generate(self):
        """Generate all Helm chart files"""
        try:
            self.templates_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"Failed to create chart directory '{self.templates_dir}': {e}",
                             str(self.templates_dir)) from e

        self.metadata_gen.generate_chart_yaml()
        self.values_gen.generate()
        self.metadata_gen.generate_helpers()
        self.metadata_gen.generate_notes()
        self.metadata_gen.generate_helmignore()

        self._write_templates(self._collect_templates())

    def _collect_templates(self) -> Dict[str, str]:
        """Read and post-process helmify templates, or fall back to defaults

        Returns:
            Template file name -> processed content, in emission order
        """
        source_dir = self.input_dir / TEMPLATES_DIRNAME if self.input_dir else None
        if source_dir is None or not source_dir.is_dir():
            if source_dir is not None:
                log_info(f"No helmify templates at {source_dir}; using built-in templates")
            return generate_default_templates()

        try:
            entries = sorted(source_dir.iterdir())
        except OSError as e:
            raise WriteError(f"Failed to list helmify templates in '{source_dir}': {e}",
                             str(source_dir)) from e

        templates = {}
        for entry in entries:
            if not entry.is_file() or entry.name in GENERATOR_OWNED_TEMPLATES:
                continue
            try:
                content = entry.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                raise WriteError(f"Failed to read helmify template '{entry}': {e}", str(entry)) from e

            kind = classify_template(entry.name)
            log_debug(f"{entry.name}: {kind.value if kind else 'unclassified, copied as-is'}")
            templates[entry.name] = process_template(entry.name, content)
        return templates

    def _write_templates(self, templates: Dict[str, str]):
        for name, content in templates.items():
            write_file(self.templates_dir / name, content, f'template {name}')
