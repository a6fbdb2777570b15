"""Hypothesis strategies for nlsassist property-based testing.

Usage:
    from tests.strategies import nls_keys, nls_mappings, nls_documents

Event-Emitting Strategies (HypoFuzz-Optimized):
    - nls_keys: Emits nls_key_len=short|medium|long
    - nls_mappings: Emits nls_mapping_size=empty|small|large
    - json_texts: Emits json_text=object|other|huge_integer
"""

from .nls import json_texts, key_prefixes, nls_documents, nls_keys, nls_mappings, nls_values

__all__ = [
    "json_texts",
    "key_prefixes",
    "nls_documents",
    "nls_keys",
    "nls_mappings",
    "nls_values",
]
