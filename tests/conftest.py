"""Shared fixtures for UnrealAssetScanner tests."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from unreal_asset_scanner.walker import DirectoryEntry


# Files of the sample project, relative to the project root
SAMPLE_PROJECT_FILES = [
    "Content/Characters/BP_Hero.uasset",
    "Content/Maps/Level1.umap",
    "Content/Materials/M_Skin.uasset",
    "Content/readme.txt",
]


def create_project(root: Path, files) -> Path:
    """Create an Unreal project tree with empty files under ``root``."""
    (root / "Content").mkdir(parents=True, exist_ok=True)
    for relative in files:
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(b"")
    return root


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """A project containing a Blueprint, a Level, a Material and a text file."""
    return create_project(tmp_path / "MyGame", SAMPLE_PROJECT_FILES)


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """A project whose Content folder exists but is empty."""
    return create_project(tmp_path / "EmptyGame", [])


class InMemoryEntries:
    """Entry source serving a fixed list of entries instead of the filesystem."""

    def __init__(self, entries, errors=()):
        self.entries = list(entries)
        self.errors = list(errors)
        self.requested_roots = []

    def __call__(self, root, on_error=None):
        self.requested_roots.append(root)
        for path in self.errors:
            if on_error:
                on_error(path, PermissionError(13, "Permission denied", path))
        yield from self.entries


def file_entry(path: str) -> DirectoryEntry:
    return DirectoryEntry(path=path, is_file=True)


def dir_entry(path: str) -> DirectoryEntry:
    return DirectoryEntry(path=path, is_file=False)
