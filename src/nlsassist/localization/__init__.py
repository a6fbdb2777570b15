"""Localization file loading and querying.

Provides the sibling-file convention, the pluggable loader protocol, the
tagged LoadResult, and the exact/prefix/navigation queries.

Python 3.13+. Zero external dependencies.
"""

from nlsassist.enums import LoadStatus
from nlsassist.localization.loading import (
    LoadResult,
    NlsLoader,
    PathNlsLoader,
    load_mapping,
    load_mapping_async,
    locate_sibling_file,
    parse_mapping,
)
from nlsassist.localization.resolver import (
    KeyLookup,
    NavigationSpan,
    NlsResolver,
    find_key_offset,
    format_value,
    locate_key,
    lookup_exact,
    lookup_prefix,
    word_range_around_offset,
)
from nlsassist.localization.types import LocalizationMapping, NlsKey, NlsSource, NlsValue

__all__ = [
    "KeyLookup",
    "LoadResult",
    "LoadStatus",
    "LocalizationMapping",
    "NavigationSpan",
    "NlsKey",
    "NlsLoader",
    "NlsResolver",
    "NlsSource",
    "NlsValue",
    "PathNlsLoader",
    "find_key_offset",
    "format_value",
    "load_mapping",
    "load_mapping_async",
    "locate_key",
    "locate_sibling_file",
    "lookup_exact",
    "lookup_prefix",
    "parse_mapping",
    "word_range_around_offset",
]
