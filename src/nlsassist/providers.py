"""Hover, completion and definition providers.

Three coroutines over the shared locator/resolver core, each adapting the
result into the response shape its editor capability expects. None of
them raises for an expected outcome: a missing file, a malformed file, a
missing key or a cursor off any placeholder all produce a well-formed
(possibly empty) response.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nlsassist.diagnostics import Diagnostic, ErrorTemplate
from nlsassist.enums import CompletionItemKind
from nlsassist.localization.resolver import (
    NlsResolver,
    format_value,
    locate_key,
    lookup_exact,
    lookup_prefix,
)
from nlsassist.syntax.document import TextDocument
from nlsassist.syntax.locator import match_full_token, match_partial_token

if TYPE_CHECKING:
    from pathlib import Path

    from nlsassist.syntax.position import Position, Range

__all__ = [
    "CompletionItem",
    "Hover",
    "Location",
    "provide_completion_items",
    "provide_definition",
    "provide_hover",
    "resolve_completion_item",
]

logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Hover:
    """Hover content for a placeholder.

    Attributes:
        contents: Resolved value, or the message explaining why there is none
        range: Placeholder token the hover applies to
        diagnostic: Structured reason when contents is a message
    """

    contents: str
    range: Range | None = None
    diagnostic: Diagnostic | None = None

    @property
    def is_resolved(self) -> bool:
        """Check if contents is the localized value."""
        return self.diagnostic is None


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """Completion candidate for a placeholder being typed.

    Attributes:
        label: Text shown and inserted, e.g. '"%ext.description%"'
        kind: Item classification (always VALUE)
        detail: Localized value of the key
    """

    label: str
    kind: CompletionItemKind = CompletionItemKind.VALUE
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class Location:
    """Navigable target inside the localization file."""

    path: Path
    range: Range


# ============================================================================
# PROVIDERS
# ============================================================================


async def provide_hover(
    document: TextDocument, position: Position, resolver: NlsResolver
) -> Hover | None:
    """Resolve the placeholder under the cursor to its localized value.

    Args:
        document: Manifest document
        position: Cursor position
        resolver: Resolver bound to the localization file convention

    Returns:
        Hover with the value or an explanatory message; None when the cursor
        is not on a complete placeholder
    """
    token = match_full_token(document, position)
    if token is None:
        return None

    nls_filename = resolver.config.nls_filename
    result = await resolver.load_async(document.path)
    if result.mapping is None:
        diagnostic = result.diagnostic(nls_filename)
        return Hover(str(diagnostic), token.range, diagnostic)

    lookup = lookup_exact(result.mapping, token.key)
    if not lookup.found:
        diagnostic = ErrorTemplate.key_not_found(token.key, nls_filename, result.source_path)
        return Hover(diagnostic.message, token.range, diagnostic)

    return Hover(format_value(lookup.value), token.range)


async def provide_completion_items(
    document: TextDocument, position: Position, resolver: NlsResolver
) -> list[CompletionItem]:
    """List the keys matching the placeholder prefix being typed.

    Args:
        document: Manifest document
        position: Cursor position
        resolver: Resolver bound to the localization file convention

    Returns:
        One item per matching key, in file order; empty when completion does
        not apply or no usable localization file exists
    """
    partial = match_partial_token(document, position)
    if partial is None:
        return []

    result = await resolver.load_async(document.path)
    if result.mapping is None:
        return []

    matches = lookup_prefix(result.mapping, partial.prefix)
    logger.debug("%d completion(s) for prefix %r", len(matches), partial.prefix)
    return [
        CompletionItem(label=f'"%{key}%"', detail=format_value(value))
        for key, value in matches
    ]


def resolve_completion_item(item: CompletionItem) -> CompletionItem:
    """Fill in lazily computed item details.

    Items are complete when listed, so this returns the item unchanged.
    """
    return item


async def provide_definition(
    document: TextDocument, position: Position, resolver: NlsResolver
) -> Location | None:
    """Locate the definition of the placeholder under the cursor.

    Args:
        document: Manifest document
        position: Cursor position
        resolver: Resolver bound to the localization file convention

    Returns:
        Location of the quoted key in the localization file, or None
    """
    token = match_full_token(document, position)
    if token is None:
        return None

    result = await resolver.load_async(document.path)
    if result.mapping is None or result.source is None:
        return None
    if not lookup_exact(result.mapping, token.key).found:
        return None

    span = locate_key(TextDocument(result.path, result.source), token.key)
    if span is None:
        return None
    return Location(span.path, span.range)
