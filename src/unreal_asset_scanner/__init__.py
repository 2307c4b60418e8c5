"""UnrealAssetScanner - catalog Unreal Engine content assets from a project tree."""

from .errors import ContentRootMissingError, ScannerError
from .models import AssetCategory, AssetRecord, ScanReport
from .scanner import AssetScanner, scan_project
from .search import search_assets

__version__ = "0.1.0"

__all__ = [
    "AssetCategory",
    "AssetRecord",
    "AssetScanner",
    "ContentRootMissingError",
    "ScanReport",
    "ScannerError",
    "scan_project",
    "search_assets",
]
