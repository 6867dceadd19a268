"""
Normalizer package

Turns Pulumi rendered manifests into a clean document stream ready for
chart generation.
"""
from .manifest_reader import ManifestReader
from .name_mapper import (
    build_name_map,
    disambiguate_service_accounts,
    apply_name_map,
    replace_names,
    strip_hash_suffix
)
from .cleaners import remove_pulumi_annotations, normalize_secret_encoding, decode_secret_value
from .preprocessor import Resource, PreprocessResult, preprocess

__all__ = [
    'ManifestReader',
    'build_name_map',
    'disambiguate_service_accounts',
    'apply_name_map',
    'replace_names',
    'strip_hash_suffix',
    'remove_pulumi_annotations',
    'normalize_secret_encoding',
    'decode_secret_value',
    'Resource',
    'PreprocessResult',
    'preprocess',
]
