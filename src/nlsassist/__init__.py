"""nlsassist - package.nls.json placeholder resolution for package.json manifests.

Resolves ``"%some.key%"`` placeholders in a package.json against the
sibling package.nls.json and builds three editor assists on top:
hover preview, key-prefix completion and go-to-definition.

Public API:
    NlsAssistant - Facade routing documents through workspace registrations
    AssistConfig - Filename, selector and trigger configuration
    TextDocument, Position, Range - Editor-style document addressing
    provide_hover, provide_completion_items, provide_definition - Providers
    match_full_token, match_partial_token - Placeholder detection
    load_mapping, lookup_exact, lookup_prefix, locate_key - Resolution core

Submodules:
    nlsassist.syntax - Document model and placeholder locator
    nlsassist.localization - Loading and querying package.nls.json
    nlsassist.diagnostics - Error types and message templates
    nlsassist.workspace - Workspace folder registry
    nlsassist.cli - Command-line host
"""

from .assistant import NlsAssistant
from .config import AssistConfig
from .diagnostics import Diagnostic, DiagnosticCode, NlsError, NlsParseError
from .enums import CompletionItemKind, LoadStatus, ProviderKind
from .localization import (
    LoadResult,
    NlsResolver,
    load_mapping,
    locate_key,
    locate_sibling_file,
    lookup_exact,
    lookup_prefix,
    parse_mapping,
)
from .providers import (
    CompletionItem,
    Hover,
    Location,
    provide_completion_items,
    provide_definition,
    provide_hover,
)
from .syntax import Position, Range, TextDocument, match_full_token, match_partial_token
from .workspace import ProviderRegistry, WorkspaceFolder

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("nlsassist")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AssistConfig",
    "CompletionItem",
    "CompletionItemKind",
    "Diagnostic",
    "DiagnosticCode",
    "Hover",
    "LoadResult",
    "LoadStatus",
    "Location",
    "NlsAssistant",
    "NlsError",
    "NlsParseError",
    "NlsResolver",
    "Position",
    "ProviderKind",
    "ProviderRegistry",
    "Range",
    "TextDocument",
    "WorkspaceFolder",
    "__version__",
    "load_mapping",
    "locate_key",
    "locate_sibling_file",
    "lookup_exact",
    "lookup_prefix",
    "match_full_token",
    "match_partial_token",
    "parse_mapping",
    "provide_completion_items",
    "provide_definition",
    "provide_hover",
]
