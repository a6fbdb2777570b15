"""Facade routing manifest queries to the providers.

NlsAssistant plays the part of the host editor: it owns the workspace
registry, hands documents that match a registration to the providers,
and ignores everything else.

Example:
    >>> assistant = NlsAssistant()
    >>> assistant.add_folder(WorkspaceFolder(Path("/ws")))
    >>> doc = assistant.open_document(Path("/ws/ext/package.json"))
    >>> hover = asyncio.run(assistant.hover(doc, Position(3, 24)))

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nlsassist.config import AssistConfig
from nlsassist.enums import ProviderKind
from nlsassist.localization.loading import NlsLoader
from nlsassist.localization.resolver import NlsResolver
from nlsassist.providers import (
    CompletionItem,
    Hover,
    Location,
    provide_completion_items,
    provide_definition,
    provide_hover,
    resolve_completion_item,
)
from nlsassist.syntax.document import TextDocument
from nlsassist.workspace import ProviderRegistry, WorkspaceFolder

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from nlsassist.syntax.position import Position

__all__ = ["NlsAssistant"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NlsAssistant:
    """Entry point for hover, completion and definition queries.

    Attributes:
        config: Shared configuration
        loader: Loader for localization files (default: filesystem)
        registry: Workspace folder registrations
    """

    config: AssistConfig = field(default_factory=AssistConfig)
    loader: NlsLoader | None = None
    registry: ProviderRegistry = field(init=False)
    _resolver: NlsResolver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.registry = ProviderRegistry(self.config)
        self._resolver = NlsResolver(self.config, self.loader)

    @property
    def resolver(self) -> NlsResolver:
        """Resolver shared by all providers."""
        return self._resolver

    def add_folder(self, folder: WorkspaceFolder) -> None:
        """Attach providers to a workspace folder (idempotent)."""
        self.registry.attach(folder)

    def change_folders(
        self,
        added: Iterable[WorkspaceFolder] = (),
        removed: Iterable[WorkspaceFolder] = (),
    ) -> None:
        """Apply a workspace folder change event."""
        self.registry.on_did_change_workspace_folders(added, removed)

    def open_document(self, path: Path) -> TextDocument:
        """Read a manifest from disk.

        Raises:
            FileNotFoundError: If the manifest does not exist
            OSError: If the manifest cannot be read
            UnicodeDecodeError: If the manifest cannot be decoded
        """
        return TextDocument.from_path(path, self.config.encoding)

    def applies_to(self, document: TextDocument, kind: ProviderKind) -> bool:
        """Check if a capability is registered for the document."""
        registration = self.registry.registration_for(document.path)
        if registration is None:
            logger.debug("No registration covers %s", document.path)
            return False
        return kind in registration.providers

    async def hover(self, document: TextDocument, position: Position) -> Hover | None:
        """Hover preview for the placeholder under the cursor."""
        if not self.applies_to(document, ProviderKind.HOVER):
            return None
        return await provide_hover(document, position, self._resolver)

    async def complete(
        self,
        document: TextDocument,
        position: Position,
        trigger_character: str | None = None,
    ) -> list[CompletionItem]:
        """Completion items for the placeholder being typed.

        Args:
            document: Manifest document
            position: Cursor position
            trigger_character: Character that triggered the request, if the
                request was triggered by typing; must be a registered trigger
        """
        if not self.applies_to(document, ProviderKind.COMPLETION):
            return []
        if trigger_character is not None and trigger_character not in self.config.trigger_characters:
            return []
        return await provide_completion_items(document, position, self._resolver)

    def resolve_completion_item(self, item: CompletionItem) -> CompletionItem:
        """Resolve a completion item selected by the user."""
        return resolve_completion_item(item)

    async def definition(self, document: TextDocument, position: Position) -> Location | None:
        """Location of the key definition for the placeholder under the cursor."""
        if not self.applies_to(document, ProviderKind.DEFINITION):
            return None
        return await provide_definition(document, position, self._resolver)
