"""Static tool definitions for the UnrealAssetScanner MCP tools.

Single source for each tool's description and MCP annotations (server.py
registers the tools from these) and for the input schemas used to validate
arguments before a scan is started.
"""

from typing import Dict, Any

from .constants import DEFAULT_SEARCH_MAX_RESULTS

_PROJECT_ROOT_PROPERTY = {
    "type": "string",
    "description": "Absolute path of the Unreal project root (the folder containing the .uproject file and the Content folder)."
}


def _read_only_annotations(title: str) -> Dict[str, Any]:
    return {
        "title": title,
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True
    }


def get_tool_definitions() -> Dict[str, Dict[str, Any]]:
    """Get all tool definitions.
    
    Returns:
        Dictionary mapping tool names to tool definitions
    """
    tools = {}
    
    tools["scan_unreal_project"] = {
        "name": "scan_unreal_project",
        "description": (
            "Scan the Content folder of an Unreal project for .uasset and .umap files. "
            "Returns every asset with its /Game/ reference path (e.g. '/Game/Characters/BP_Hero'), its file path on disk "
            "and a type inferred from naming conventions: .umap files are Level, BP_ is Blueprint, M_ is Material, "
            "SM_ is StaticMesh, T_ is Texture, anything else is Asset. The type is a heuristic, not engine metadata. "
            "Returns an error if the project has no Content folder."
        ),
        "annotations": _read_only_annotations("Scan Unreal Project"),
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectRoot": _PROJECT_ROOT_PROPERTY
            },
            "required": ["projectRoot"]
        }
    }
    
    tools["search_unreal_assets"] = {
        "name": "search_unreal_assets",
        "description": (
            "Scan an Unreal project and return the assets whose name or /Game/ path contains the query, ignoring case. "
            "Use this to find a specific asset reference without listing the whole project. "
            "An empty query returns no assets. Use maxResults to limit the number of matches."
        ),
        "annotations": _read_only_annotations("Search Unreal Assets"),
        "inputSchema": {
            "type": "object",
            "properties": {
                "projectRoot": _PROJECT_ROOT_PROPERTY,
                "query": {"type": "string", "description": "Substring to search for. An empty query returns no assets."},
                "maxResults": {
                    "type": "integer",
                    "description": "Maximum number of matches to return",
                    "default": DEFAULT_SEARCH_MAX_RESULTS
                }
            },
            "required": ["projectRoot", "query"]
        }
    }
    
    return tools


_JSON_TYPES = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


def validate_arguments(tool_definition: Dict[str, Any], arguments: Dict[str, Any]) -> list[str]:
    """Check tool arguments against the tool's input schema.
    
    Only required fields and declared property types are checked.
    
    Args:
        tool_definition: Tool definition from get_tool_definitions()
        arguments: Arguments supplied by the caller
    
    Returns:
        List of problems found (empty if the arguments are usable)
    """
    issues = []
    input_schema = tool_definition.get("inputSchema", {})
    properties = input_schema.get("properties", {})
    
    missing_required = [f for f in input_schema.get("required", []) if f not in arguments]
    if missing_required:
        issues.append(f"Missing required arguments: {', '.join(missing_required)}")
    
    for field_name, value in arguments.items():
        expected_type = properties.get(field_name, {}).get("type")
        if not expected_type or value is None:
            continue
        python_types = _JSON_TYPES.get(expected_type, (object,))
        # bool is an int subclass but not a JSON integer
        if isinstance(value, bool) and expected_type in ("integer", "number"):
            issues.append(f"Argument '{field_name}' must be of type '{expected_type}'")
        elif not isinstance(value, python_types):
            issues.append(f"Argument '{field_name}' must be of type '{expected_type}'")
    
    return issues
