#!/usr/bin/env python3
"""
Pulumi to Helm Chart Converter

This script converts Kubernetes manifests rendered by Pulumi into a Helm chart.
Pulumi auto-named resources lose their random suffixes, references between
resources are rewritten accordingly, and hardcoded values become Helm values.

Usage:
    python convert.py --input-dir rendered/ --output-dir charts/pulumi-deployment-agent
    python convert.py --input-dir rendered/ --output-dir out/ --chart-version 0.2.0 --app-version 2.1.0

Arguments:
    --input-dir: Directory containing Pulumi rendered YAML manifests
    --output-dir: Output directory for the generated Helm chart
    --chart-name: Helm chart name (default: pulumi-deployment-agent)
    --chart-version: Helm chart version (default: 0.1.0)
    --app-version: Application version (defaults to chart version)
"""

import argparse
import sys
import traceback

from helm_gen.config import ChartOptions
from helm_gen.constants import DEFAULT_CHART_NAME, DEFAULT_CHART_VERSION
from helm_gen.errors import HelmGenError
from helm_gen.logger import is_verbose, log_error, log_success, set_verbose
from helm_gen.pipeline import run


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert Pulumi rendered Kubernetes manifests to a Helm chart"
    )
    parser.add_argument(
        "--input-dir",
        required=True,
        help="Directory containing Pulumi rendered YAML manifests",
    )
    parser.add_argument(
        "--output-dir",
        required=True,
        help="Output directory for the Helm chart",
    )
    parser.add_argument(
        "--chart-name",
        default=DEFAULT_CHART_NAME,
        help=f"Helm chart name (default: {DEFAULT_CHART_NAME})",
    )
    parser.add_argument(
        "--chart-version",
        default=DEFAULT_CHART_VERSION,
        help=f"Helm chart version (default: {DEFAULT_CHART_VERSION})",
    )
    parser.add_argument(
        "--app-version",
        default="",
        help="Application version (defaults to chart version)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug output and tracebacks",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)

    options = ChartOptions(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        chart_name=args.chart_name,
        chart_version=args.chart_version,
        app_version=args.app_version,
    )

    try:
        run(options)
    except HelmGenError as e:
        log_error(str(e))
        if is_verbose():
            traceback.print_exc()
        return 1

    log_success(f"Chart {options.chart_name} {options.chart_version} written to {options.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
