"""Error types and error response helpers for UnrealAssetScanner."""

import json
from typing import Dict, Any, Optional

from .constants import ERROR_CONTENT_ROOT_MISSING


class ScannerError(Exception):
    """Base class for errors surfaced to scanner callers."""

    code: Optional[str] = None


class ContentRootMissingError(ScannerError):
    """Raised when a project root has no Content folder.

    Not retriable: the caller has to supply a different project root.
    """

    code = ERROR_CONTENT_ROOT_MISSING

    def __init__(self, project_root: str, content_root: str):
        self.project_root = project_root
        self.content_root = content_root
        super().__init__(f"Content folder not found: {content_root}")


def create_error_response(error_message: str, error_code: Optional[str] = None) -> Dict[str, Any]:
    """Create a standardized error response in MCP format.
    
    Args:
        error_message: Human-readable error message
        error_code: Optional error code for programmatic handling
    
    Returns:
        Error response dictionary in MCP format
    """
    error_data = {"error": error_message}
    if error_code:
        error_data["code"] = error_code
    
    return {
        "isError": True,
        "content": [{
            "type": "text",
            "text": json.dumps(error_data)
        }]
    }


def error_response_from_exception(error: ScannerError) -> Dict[str, Any]:
    """Convert a ScannerError into an MCP error response."""
    return create_error_response(str(error), error.code)
