"""UnrealAssetScanner - FastMCP server exposing the asset scan as tools."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Any

# When run as a script, __package__ is None, so the src directory is added to
# sys.path and absolute imports are used instead of relative ones.
try:
    package = __package__
except NameError:
    package = None

is_script = not package

if is_script:
    current_file = Path(__file__).resolve()
    src_dir = current_file.parent.parent  # src/unreal_asset_scanner/server.py -> src/
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

from fastmcp import FastMCP

if is_script:
    from unreal_asset_scanner.config import ServerSettings, MCPTransport, setup_logging
    from unreal_asset_scanner.constants import DEFAULT_SEARCH_MAX_RESULTS
    from unreal_asset_scanner.tools import call_tool
    from unreal_asset_scanner.tool_definitions import get_tool_definitions
else:
    from .config import ServerSettings, MCPTransport, setup_logging
    from .constants import DEFAULT_SEARCH_MAX_RESULTS
    from .tools import call_tool
    from .tool_definitions import get_tool_definitions

# Initialize settings and logging
settings = ServerSettings()
setup_logging(settings)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("unreal-asset-scanner")

tool_definitions: Dict[str, Dict[str, Any]] = get_tool_definitions()
logger.info(f"Loaded {len(tool_definitions)} tool definitions")


async def _call_tool_wrapper(tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Wrapper for call_tool that provides context from module-level variables."""
    return await call_tool(tool_name, arguments, settings, tool_definitions)


# Descriptions and annotations come from tool_definitions.py
@mcp.tool(
    description=tool_definitions["scan_unreal_project"]["description"],
    annotations=tool_definitions["scan_unreal_project"]["annotations"]
)
async def scan_unreal_project(projectRoot: str) -> Dict[str, Any]:
    return await _call_tool_wrapper("scan_unreal_project", {"projectRoot": projectRoot})


@mcp.tool(
    description=tool_definitions["search_unreal_assets"]["description"],
    annotations=tool_definitions["search_unreal_assets"]["annotations"]
)
async def search_unreal_assets(projectRoot: str, query: str, maxResults: int = DEFAULT_SEARCH_MAX_RESULTS) -> Dict[str, Any]:
    return await _call_tool_wrapper("search_unreal_assets", {"projectRoot": projectRoot, "query": query, "maxResults": maxResults})


def main():
    """Run the server with the configured transport."""
    logger.info(f"Starting UnrealAssetScanner server (transport={settings.transport.value})")
    
    run_kwargs = {"transport": settings.transport.value}
    if settings.transport != MCPTransport.stdio:
        # Only add host/port for non-stdio transports
        run_kwargs["host"] = settings.host
        run_kwargs["port"] = settings.port
    
    mcp.run(**run_kwargs)


if __name__ == "__main__":
    main()
