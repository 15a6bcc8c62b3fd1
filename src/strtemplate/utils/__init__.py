"""
strtemplate.utils – Small shared utilities.
"""
from .encodings import normalize_encoding

__all__ = ["normalize_encoding"]
