"""Constants for UnrealAssetScanner."""

# Project layout
CONTENT_DIR_NAME = "Content"

# Virtual path prefix for project content
VIRTUAL_ROOT = "/Game/"

# Accepted asset file extensions (case-sensitive, no leading dot)
UASSET_EXTENSION = "uasset"
UMAP_EXTENSION = "umap"
ASSET_EXTENSIONS = frozenset({UASSET_EXTENSION, UMAP_EXTENSION})

# Default MCP server port
DEFAULT_SERVER_PORT = 30071

# Default number of search results
DEFAULT_SEARCH_MAX_RESULTS = 20

# Error codes returned by the tool layer
ERROR_CONTENT_ROOT_MISSING = "content_root_missing"
ERROR_INVALID_ARGUMENTS = "invalid_arguments"
ERROR_UNKNOWN_TOOL = "unknown_tool"
ERROR_SCAN_FAILED = "scan_failed"
