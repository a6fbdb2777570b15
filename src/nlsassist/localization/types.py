"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocalizationMapping",
    "NlsKey",
    "NlsSource",
    "NlsValue",
]

type NlsKey = str
"""Externalization key (e.g., 'extension.description')."""

type NlsValue = object
"""Value stored under a key; a string in well-formed files, opaque otherwise."""

type LocalizationMapping = dict[NlsKey, NlsValue]
"""Flat key -> value mapping parsed from package.nls.json."""

type NlsSource = str
"""Raw package.nls.json text as a Python string."""
