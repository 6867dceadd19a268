"""
Resource cleaners

Strip Pulumi bookkeeping annotations and turn Secret data into stringData.
"""
import base64
import binascii
from typing import Any, Dict

from ..constants import PULUMI_ANNOTATION_PREFIX
from ..logger import log_warning
from ..utils import get_map, get_nested_str, get_str


def remove_pulumi_annotations(doc: Dict[str, Any]) -> None:
    """Remove pulumi.com/* annotations, dropping the annotations map if it ends up empty"""
    meta = get_map(doc, 'metadata')
    if meta is None:
        return
    annotations = get_map(meta, 'annotations')
    if annotations is None:
        return

    for key in [k for k in annotations
                if isinstance(k, str) and k.startswith(PULUMI_ANNOTATION_PREFIX)]:
        del annotations[key]

    if not annotations:
        del meta['annotations']


def decode_secret_value(value: str) -> str:
    """Decode a base64 Secret value to text

    Raises:
        ValueError: If the value is not valid base64 or not UTF-8 text
    """
    try:
        return base64.b64decode(value, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(str(e)) from e


def normalize_secret_encoding(doc: Dict[str, Any]) -> None:
    """Convert Secret.data (base64) to Secret.stringData (plain text)

    Values that do not decode are kept as-is under stringData. Keys already in
    stringData are kept unless data has the same key.
    """
    if get_str(doc, 'kind') != 'Secret':
        return

    data = get_map(doc, 'data')
    if data is None:
        return

    string_data = dict(get_map(doc, 'stringData') or {})
    for key, value in data.items():
        if not isinstance(value, str):
            string_data[key] = value
            continue
        try:
            string_data[key] = decode_secret_value(value)
        except ValueError as e:
            name = get_nested_str(doc, 'metadata', 'name')
            log_warning(f"Secret {name}: key {key} is not valid base64 ({e}); keeping raw value")
            string_data[key] = value

    del doc['data']
    doc['stringData'] = string_data
