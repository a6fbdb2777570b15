"""Shared constants for nlsassist.

Filenames, selector globs and the token patterns used by the locator and
resolver. Token patterns are compiled once at import.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = [
    "COMPLETION_TRIGGER_CHARACTERS",
    "DEFAULT_ENCODING",
    "KEY_CHARACTERS",
    "MANIFEST_FILENAME",
    "MANIFEST_GLOB",
    "MIN_FULL_TOKEN_LENGTH",
    "NLS_FILENAME",
    "NLS_KEY_PATTERN",
    "PARTIAL_PLACEHOLDER_PATTERN",
    "PLACEHOLDER_PATTERN",
]

# ============================================================================
# FILES
# ============================================================================

MANIFEST_FILENAME = "package.json"
NLS_FILENAME = "package.nls.json"

# Selector pattern relative to a workspace folder
MANIFEST_GLOB = "**/package.json"

DEFAULT_ENCODING = "utf-8"

# ============================================================================
# TOKEN PATTERNS
# ============================================================================

# Characters allowed in an externalization key
KEY_CHARACTERS = r"a-zA-Z0-9.\-"

# Complete placeholder occupying a whole JSON string: "%some.key%"
PLACEHOLDER_PATTERN = re.compile(rf'"%[{KEY_CHARACTERS}]+%"')

# Placeholder still being typed: "%some.ke
PARTIAL_PLACEHOLDER_PATTERN = re.compile(rf'"%[{KEY_CHARACTERS}]*')

# Quoted key inside package.nls.json: "some.key"
NLS_KEY_PATTERN = re.compile(rf'"[{KEY_CHARACTERS}]+"')

# '"%' + at least one key character + '%"'
MIN_FULL_TOKEN_LENGTH = 5

# ============================================================================
# PROVIDERS
# ============================================================================

COMPLETION_TRIGGER_CHARACTERS: tuple[str, ...] = ("%", ".")
