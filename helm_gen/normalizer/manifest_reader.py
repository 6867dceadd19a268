"""
Manifest Reader Module

Reads Pulumi rendered YAML files from a directory and parses them into
Kubernetes resource documents.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..constants import YAML_EXTENSIONS
from ..errors import ConfigurationError, ParseError
from ..logger import log_debug


class ManifestReader:
    """Reads every YAML manifest in a single directory (non-recursive)"""

    def __init__(self, input_dir: Path):
        self.input_dir = Path(input_dir)

    def list_manifest_files(self) -> List[Path]:
        """List .yaml/.yml files in the input directory, sorted by name

        Raises:
            ConfigurationError: If the directory cannot be listed
        """
        try:
            entries = sorted(self.input_dir.iterdir())
        except OSError as e:
            raise ConfigurationError(f"Cannot list input directory '{self.input_dir}': {e}") from e

        return [
            entry for entry in entries
            if entry.is_file() and entry.suffix in YAML_EXTENSIONS
        ]

    def read_documents(self) -> List[Dict[str, Any]]:
        """Read and parse all manifest documents in file order

        Returns:
            List of resource documents; blocks without apiVersion or kind are dropped

        Raises:
            ConfigurationError: If the directory or a file cannot be read
            ParseError: If a file is not UTF-8 or contains malformed YAML
        """
        docs = []
        for manifest_file in self.list_manifest_files():
            try:
                content = manifest_file.read_text(encoding='utf-8')
            except UnicodeDecodeError as e:
                raise ParseError(manifest_file.name, f"not valid UTF-8: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Cannot read manifest '{manifest_file}': {e}") from e

            file_docs = self.split_documents(content, manifest_file.name)
            log_debug(f"{manifest_file.name}: {len(file_docs)} resource(s)")
            docs.extend(file_docs)
        return docs

    @staticmethod
    def split_documents(content: str, filename: str) -> List[Dict[str, Any]]:
        """Split a multi-document YAML string into resource documents

        Args:
            content: Raw YAML text
            filename: Source file name, used in error messages

        Returns:
            Parsed documents that carry both apiVersion and kind
        """
        try:
            parsed = list(yaml.safe_load_all(content))
        except yaml.YAMLError as e:
            raise ParseError(filename, str(e)) from e

        docs = []
        for index, doc in enumerate(parsed):
            if doc is None:
                continue
            if not isinstance(doc, dict):
                raise ParseError(
                    filename,
                    f"document {index + 1} is a {type(doc).__name__}, expected a mapping"
                )
            # Anything that is not a Kubernetes object is noise, not an error
            if not doc.get('apiVersion') or not doc.get('kind'):
                continue
            docs.append(doc)
        return docs
