"""
Shared helpers for chart generators
"""
from pathlib import Path

from ..constants import GUARD_END
from ..errors import WriteError


def write_file(path: Path, content: str, stage: str) -> None:
    """Write content to path, creating parent directories

    Args:
        path: Destination file
        content: File content
        stage: Short description used in the error message (e.g. 'Chart.yaml')

    Raises:
        WriteError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"Failed to write {stage} to '{path}': {e}", str(path)) from e


def wrap_with_guard(content: str, guard: str) -> str:
    """Enclose a template in a conditional block

    e.g. wrap_with_guard('kind: Role\\n', '{{- if .Values.rbac.create }}') returns
    '{{- if .Values.rbac.create }}\\nkind: Role\\n{{- end }}\\n'
    """
    return f'{guard}\n{content}{GUARD_END}\n'
