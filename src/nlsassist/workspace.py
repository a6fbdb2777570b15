"""Workspace folders and provider registration.

The providers apply to manifests inside workspace folders. Each folder
gets one Registration: a file selector for ``**/package.json`` below the
folder, plus the capabilities attached to it. Attaching is idempotent, so
the same call serves the initial folder list and later folder-added events.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from nlsassist.config import AssistConfig
from nlsassist.enums import ProviderKind

__all__ = [
    "DocumentSelector",
    "ProviderRegistry",
    "Registration",
    "WorkspaceFolder",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorkspaceFolder:
    """A root folder open in the workspace.

    Attributes:
        path: Absolute folder location (identity of the folder)
        name: Display name (default: last path segment)
    """

    path: Path
    name: str = ""

    def __post_init__(self) -> None:
        """Default the display name to the folder's own name."""
        if not self.name:
            object.__setattr__(self, "name", self.path.name)


@dataclass(frozen=True, slots=True)
class DocumentSelector:
    """Selects documents by scheme and a glob relative to a folder.

    Example:
        >>> selector = DocumentSelector(Path("/ws"), "**/package.json")
        >>> selector.matches(Path("/ws/ext/package.json"))
        True
        >>> selector.matches(Path("/other/package.json"))
        False
    """

    folder: Path
    pattern: str
    scheme: str = "file"

    def matches(self, path: Path, scheme: str = "file") -> bool:
        """Check if a document belongs to this selector."""
        if scheme != self.scheme:
            return False
        try:
            relative = path.relative_to(self.folder)
        except ValueError:
            return False
        if relative.full_match(self.pattern):
            return True
        # A leading "**/" also matches a manifest directly in the folder
        return self.pattern.startswith("**/") and relative.full_match(self.pattern[3:])


@dataclass(frozen=True, slots=True)
class Registration:
    """Capabilities attached to one workspace folder.

    Attributes:
        folder: Folder the registration belongs to
        selector: Documents the providers apply to
        providers: Attached capabilities
        trigger_characters: Characters that trigger completion
    """

    folder: WorkspaceFolder
    selector: DocumentSelector
    providers: tuple[ProviderKind, ...] = tuple(ProviderKind)
    trigger_characters: tuple[str, ...] = ()


@dataclass(slots=True)
class ProviderRegistry:
    """Maps workspace folders to their provider registrations.

    Attributes:
        config: Supplies the manifest selector pattern and trigger characters
    """

    config: AssistConfig = field(default_factory=AssistConfig)
    _registrations: dict[Path, Registration] = field(default_factory=dict, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[Registration]:
        return iter(self._registrations.values())

    def __contains__(self, folder: object) -> bool:
        if isinstance(folder, WorkspaceFolder):
            return folder.path in self._registrations
        return False

    @property
    def folders(self) -> tuple[WorkspaceFolder, ...]:
        """Folders with an active registration, in attach order."""
        return tuple(r.folder for r in self._registrations.values())

    def attach(self, folder: WorkspaceFolder) -> Registration:
        """Register the providers for a folder.

        Idempotent: attaching an already attached folder returns the
        existing registration unchanged.

        Args:
            folder: Workspace folder to attach

        Returns:
            The folder's registration
        """
        existing = self._registrations.get(folder.path)
        if existing is not None:
            return existing

        registration = Registration(
            folder=folder,
            selector=DocumentSelector(folder.path, self.config.manifest_pattern),
            trigger_characters=self.config.trigger_characters,
        )
        self._registrations[folder.path] = registration
        logger.debug("Attached providers to workspace folder %s", folder.path)
        return registration

    def detach(self, folder: WorkspaceFolder) -> bool:
        """Remove a folder's registration.

        Returns:
            True if the folder was attached
        """
        removed = self._registrations.pop(folder.path, None)
        if removed is not None:
            logger.debug("Detached providers from workspace folder %s", folder.path)
        return removed is not None

    def initialize(self, folders: Iterable[WorkspaceFolder]) -> None:
        """Attach every folder open at startup."""
        for folder in folders:
            self.attach(folder)

    def on_did_change_workspace_folders(
        self,
        added: Iterable[WorkspaceFolder] = (),
        removed: Iterable[WorkspaceFolder] = (),
    ) -> None:
        """Apply a workspace folder change event."""
        for folder in removed:
            self.detach(folder)
        for folder in added:
            self.attach(folder)

    def registration_for(self, path: Path, scheme: str = "file") -> Registration | None:
        """Find the registration whose selector matches a document.

        With nested workspace folders the innermost folder wins.
        """
        candidates = [r for r in self._registrations.values() if r.selector.matches(path, scheme)]
        if not candidates:
            return None
        return max(candidates, key=lambda r: len(r.folder.path.parts))
