"""Tool handling and execution logic for UnrealAssetScanner."""

import asyncio
import logging
import os
from typing import Dict, Any, Optional

from .config import ServerSettings
from .constants import (
    CONTENT_DIR_NAME, ERROR_INVALID_ARGUMENTS, ERROR_SCAN_FAILED, ERROR_UNKNOWN_TOOL
)
from .errors import ScannerError, create_error_response, error_response_from_exception
from .scanner import AssetScanner
from .search import search_assets
from .tool_definitions import validate_arguments

logger = logging.getLogger(__name__)


def scan_project_result(project_root: str, settings: ServerSettings) -> Dict[str, Any]:
    """Run a scan and build the scan_unreal_project result.
    
    Raises:
        ContentRootMissingError: If the project has no Content folder
    """
    scanner = AssetScanner(sort_results=settings.sort_results)
    report = scanner.scan_with_report(project_root)
    return {
        "projectRoot": project_root,
        "contentRoot": os.path.join(project_root, CONTENT_DIR_NAME),
        "count": len(report.assets),
        "skipped": report.skipped,
        "assets": [asset.to_dict() for asset in report.assets],
    }


def search_project_result(
    project_root: str,
    query: str,
    settings: ServerSettings,
    max_results: Optional[int] = None
) -> Dict[str, Any]:
    """Run a scan, search it and build the search_unreal_assets result.
    
    Raises:
        ContentRootMissingError: If the project has no Content folder
    """
    if max_results is None:
        max_results = settings.search_max_results
    scanner = AssetScanner(sort_results=settings.sort_results)
    matches = search_assets(scanner.scan(project_root), query, limit=max_results)
    return {
        "query": query,
        "count": len(matches),
        "assets": [asset.to_dict() for asset in matches],
    }


def _dispatch(tool_name: str, arguments: Dict[str, Any], settings: ServerSettings) -> Dict[str, Any]:
    if tool_name == "scan_unreal_project":
        return scan_project_result(arguments["projectRoot"], settings)
    if tool_name == "search_unreal_assets":
        return search_project_result(
            arguments["projectRoot"],
            arguments["query"],
            settings,
            arguments.get("maxResults"),
        )
    raise KeyError(tool_name)


async def call_tool(
    tool_name: str,
    arguments: Dict[str, Any],
    settings: ServerSettings,
    tool_definitions: Dict[str, Dict[str, Any]]
) -> Dict[str, Any]:
    """Execute a scanner tool.
    
    The scan itself is blocking filesystem I/O, so it runs in a worker thread.
    Errors are returned as MCP error dictionaries (with isError: True) instead
    of being raised, to keep FastMCP's return format consistent.
    
    Args:
        tool_name: Name of the tool to call
        arguments: Tool arguments
        settings: ServerSettings instance
        tool_definitions: Dictionary of tool definitions
    
    Returns:
        Tool result dictionary, or an error response
    """
    logger.info(f"Tool call requested: {tool_name}")
    
    tool_definition = tool_definitions.get(tool_name)
    if tool_definition is None:
        logger.warning(f"Tool '{tool_name}' not found in tool definitions")
        return create_error_response(f"Tool '{tool_name}' not found", ERROR_UNKNOWN_TOOL)
    
    issues = validate_arguments(tool_definition, arguments)
    if issues:
        logger.warning(f"Invalid arguments for tool '{tool_name}': {'; '.join(issues)}")
        return create_error_response("; ".join(issues), ERROR_INVALID_ARGUMENTS)
    
    try:
        return await asyncio.to_thread(_dispatch, tool_name, arguments, settings)
    except ScannerError as e:
        logger.warning(f"Tool '{tool_name}' failed: {str(e)}")
        return error_response_from_exception(e)
    except Exception as e:
        logger.error(f"Error executing tool '{tool_name}': {str(e)}", exc_info=True)
        return create_error_response(f"Error executing tool: {str(e)}", ERROR_SCAN_FAILED)
