"""Asset discovery for Unreal Engine project trees.

A scan walks ``<project_root>/Content``, keeps ``.uasset`` and ``.umap`` files,
classifies them by naming convention and builds their ``/Game/`` references.
Every call is a full, stateless re-scan.
"""

import logging
import os
from pathlib import PurePath
from typing import Callable, Iterable, List, Optional

from .classification import classify_asset
from .constants import ASSET_EXTENSIONS, CONTENT_DIR_NAME
from .errors import ContentRootMissingError
from .models import AssetRecord, ScanReport
from .paths import relative_to_content, to_virtual_path
from .walker import DirectoryEntry, ErrorCallback, walk_entries

logger = logging.getLogger(__name__)

# (content_root, on_error) -> entries
EntrySource = Callable[[str, Optional[ErrorCallback]], Iterable[DirectoryEntry]]


class AssetScanner:
    """Scanner for the Content folder of an Unreal project."""

    def __init__(
        self,
        entry_source: Optional[EntrySource] = None,
        path_exists: Optional[Callable[[str], bool]] = None,
        sort_results: bool = True
    ):
        """Initialize the scanner.
        
        Args:
            entry_source: Traversal used to enumerate the content root. Defaults to walk_entries.
            path_exists: Existence check for the content root. Defaults to os.path.exists.
            sort_results: Sort results by virtual path instead of returning traversal order
        """
        self.entry_source = entry_source or walk_entries
        self.path_exists = path_exists or os.path.exists
        self.sort_results = sort_results

    def scan(self, project_root: str) -> List[AssetRecord]:
        """Scan a project and return its assets.
        
        Raises:
            ContentRootMissingError: If <project_root>/Content does not exist
        """
        return self.scan_with_report(project_root).assets

    def scan_with_report(self, project_root: str) -> ScanReport:
        """Scan a project and return its assets along with the number of skipped entries.
        
        Raises:
            ContentRootMissingError: If <project_root>/Content does not exist
        """
        content_root = os.path.join(project_root, CONTENT_DIR_NAME)
        if not self.path_exists(content_root):
            logger.warning(f"Content folder not found: {content_root}")
            raise ContentRootMissingError(project_root, content_root)

        logger.info(f"Scanning {content_root}")
        report = ScanReport()

        def on_error(path: str, error: OSError) -> None:
            report.skipped += 1

        for entry in self.entry_source(content_root, on_error):
            if not entry.is_file:
                continue
            file_path = PurePath(entry.path)
            extension = file_path.suffix[1:]
            if extension not in ASSET_EXTENSIONS:
                continue

            record = self._build_record(entry.path, file_path, extension, content_root)
            if record is None:
                report.skipped += 1
                continue
            report.assets.append(record)

        if self.sort_results:
            report.assets.sort(key=lambda asset: asset.virtual_path)

        logger.info(f"Scan of {content_root} complete: {len(report.assets)} assets, {report.skipped} skipped")
        return report

    def _build_record(
        self,
        raw_path: str,
        file_path: PurePath,
        extension: str,
        content_root: str
    ) -> Optional[AssetRecord]:
        name = file_path.stem
        if not name:
            logger.debug(f"Skipping {raw_path}: no file stem")
            return None

        relative_path = relative_to_content(file_path, content_root)
        if relative_path is None:
            logger.debug(f"Skipping {raw_path}: not under {content_root}")
            return None

        return AssetRecord(
            name=name,
            virtual_path=to_virtual_path(relative_path),
            absolute_path=raw_path,
            category=classify_asset(name, extension),
        )


def scan_project(project_root: str, sort_results: bool = True) -> List[AssetRecord]:
    """Scan a project with the default filesystem traversal."""
    return AssetScanner(sort_results=sort_results).scan(project_root)
