"""
helmify runner

helmify (https://github.com/arttor/helmify) is an optional external converter
that produces a first draft of chart templates from plain manifests. When it
is missing or fails, the chart generator falls back to built-in templates.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Optional

from .constants import HELMIFY_BINARY, HELMIFY_INSTALL_HINT
from .logger import log_info, log_warning


def find_helmify() -> Optional[str]:
    """Return the helmify executable path from PATH, or None"""
    return shutil.which(HELMIFY_BINARY)


def try_helmify(input_file: Path, output_dir: Path, chart_name: str) -> bool:
    """Run helmify on the preprocessed YAML

    The preprocessed stream is fed on stdin; helmify writes
    <output_dir>/<chart_name>/templates/*. stdout and stderr are passed
    through to the console.

    Returns:
        True if helmify ran successfully, False if it is unavailable or failed
    """
    helmify_path = find_helmify()
    if not helmify_path:
        log_warning(f"{HELMIFY_BINARY} not found in PATH - will generate templates directly")
        log_info(f"To install helmify: {HELMIFY_INSTALL_HINT}")
        return False

    log_info(f"Using helmify at {helmify_path}")

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log_warning(f"Could not create helmify output dir: {e}")
        return False

    chart_dir = output_dir / chart_name
    try:
        with open(input_file, 'rb') as stdin:
            subprocess.run(
                [helmify_path, '-crd-dir', str(chart_dir)],
                stdin=stdin,
                check=True
            )
    except subprocess.CalledProcessError as e:
        log_warning(f"helmify failed: {e} - falling back to direct generation")
        return False
    except OSError as e:
        log_warning(f"Could not run helmify: {e} - falling back to direct generation")
        return False

    return True
