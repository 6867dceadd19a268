"""
Error types raised by the helm-gen pipeline
"""
from typing import Optional


class HelmGenError(Exception):
    """Base class for all pipeline failures"""


class ConfigurationError(HelmGenError):
    """Bad or missing input/output directories or CLI values"""


class ParseError(HelmGenError):
    """A manifest file contains a malformed YAML document"""

    def __init__(self, filename: str, message: str):
        super().__init__(f"parsing {filename}: {message}")
        self.filename = filename


class EmptyInputError(HelmGenError):
    """No usable Kubernetes resources were found"""


class WriteError(HelmGenError):
    """I/O failure while writing generated output"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
