"""
Preprocessor Module

Reads Pulumi rendered manifests and normalizes them into a clean,
cross-reference consistent multi-document YAML stream.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..errors import EmptyInputError, WriteError
from ..utils import dump_multi_doc, get_nested_str, get_str
from .cleaners import normalize_secret_encoding, remove_pulumi_annotations
from .manifest_reader import ManifestReader
from .name_mapper import apply_name_map, build_name_map, disambiguate_service_accounts


@dataclass
class Resource:
    """Summary of a normalized resource, used for progress reporting"""

    api_version: str
    kind: str
    name: str


@dataclass
class PreprocessResult:
    """Normalized resources and their serialized YAML stream"""

    resources: List[Resource] = field(default_factory=list)
    yaml: str = ''

    def write_to_file(self, path: Path) -> None:
        """Write the YAML stream to path, creating parent directories

        Raises:
            WriteError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.yaml)
        except OSError as e:
            raise WriteError(f"Failed to write preprocessed YAML to '{path}': {e}", str(path)) from e


def preprocess(input_dir: Path) -> PreprocessResult:
    """Read and normalize every manifest in input_dir

    Steps:
        1. Load all documents
        2. Build the rename map and resolve ServiceAccount collisions
        3. Rewrite references, strip Pulumi annotations, decode Secrets
        4. Serialize back to multi-document YAML

    Raises:
        ConfigurationError: If the directory cannot be read
        ParseError: If a manifest is malformed
        EmptyInputError: If no Kubernetes resources are found
    """
    reader = ManifestReader(input_dir)
    docs = reader.read_documents()

    if not docs:
        raise EmptyInputError(f"no Kubernetes resources found in {input_dir}")

    name_map = build_name_map(docs)
    disambiguate_service_accounts(docs, name_map)

    for doc in docs:
        apply_name_map(doc, name_map)
        remove_pulumi_annotations(doc)
        normalize_secret_encoding(doc)

    resources = [
        Resource(
            api_version=get_str(doc, 'apiVersion'),
            kind=get_str(doc, 'kind'),
            name=get_nested_str(doc, 'metadata', 'name'),
        )
        for doc in docs
    ]

    return PreprocessResult(resources=resources, yaml=dump_multi_doc(docs))
