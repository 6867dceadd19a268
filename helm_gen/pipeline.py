"""
Pipeline Module

Runs the full conversion: preprocess -> helmify (optional) -> chart generation.
"""

import tempfile
from pathlib import Path

from .config import ChartOptions
from .constants import HELMIFY_OUTPUT_DIRNAME, PREPROCESSED_FILENAME
from .generators import ChartGenerator
from .helmify import try_helmify
from .logger import log_info
from .normalizer import preprocess


def run(options: ChartOptions) -> None:
    """Execute the full pipeline

    Intermediate files live in a temporary directory that is removed on
    every exit path. Output is written only after preprocessing succeeds.

    Raises:
        HelmGenError: On any unrecoverable failure
    """
    options.validate()

    log_info(f"Reading Pulumi rendered manifests from {options.input_dir}")
    result = preprocess(options.input_dir)

    log_info(f"Preprocessed {len(result.resources)} resources")
    for resource in result.resources:
        print(f"  - {resource.api_version}/{resource.kind} ({resource.name})")

    with tempfile.TemporaryDirectory(prefix='helm-gen-') as tmp:
        tmp_dir = Path(tmp)
        preprocessed_file = tmp_dir / PREPROCESSED_FILENAME
        result.write_to_file(preprocessed_file)

        helmify_output_dir = tmp_dir / HELMIFY_OUTPUT_DIRNAME
        if try_helmify(preprocessed_file, helmify_output_dir, options.chart_name):
            log_info("Post-processing helmify output")
            chart_input_dir = helmify_output_dir / options.chart_name
        else:
            log_info("Generating templates directly (helmify not available)")
            chart_input_dir = None

        ChartGenerator(options, chart_input_dir).generate()

    log_info(f"Helm chart generated at {options.output_dir}")
