"""Configuration and settings for UnrealAssetScanner."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_SERVER_PORT, DEFAULT_SEARCH_MAX_RESULTS


class MCPTransport(str, Enum):
    """MCP transport types."""
    stdio = "stdio"
    sse = "sse"
    http = "http"


class ServerSettings(BaseSettings):
    """Server configuration settings."""
    model_config = SettingsConfigDict(env_prefix="unreal_asset_scanner_", env_file=".env", extra='ignore')
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = DEFAULT_SERVER_PORT
    transport: MCPTransport = MCPTransport.stdio
    
    # Scan settings
    sort_results: bool = True  # Sort assets by virtual path instead of traversal order
    search_max_results: int = DEFAULT_SEARCH_MAX_RESULTS
    
    # Development mode
    debug: bool = False
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    @field_validator('port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v
    
    @field_validator('search_max_results')
    @classmethod
    def validate_search_max_results(cls, v: int) -> int:
        """Validate search limit is positive."""
        if v <= 0:
            raise ValueError(f"Search max results must be positive, got {v}")
        return v
    
    @field_validator('transport', mode='before')
    @classmethod
    def validate_transport(cls, v: str | MCPTransport) -> MCPTransport:
        """Validate transport type."""
        if isinstance(v, str) and not isinstance(v, MCPTransport):
            try:
                return MCPTransport(v.lower())
            except ValueError:
                raise ValueError(f"Invalid transport type: {v}. Must be one of: {', '.join(t.value for t in MCPTransport)}")
        return v
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()


def setup_logging(settings: ServerSettings):
    """Configure logging based on settings."""
    # In debug mode, force DEBUG log level
    if settings.debug:
        numeric_level = logging.DEBUG
    else:
        numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    
    formatter = logging.Formatter(settings.log_format)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    
    # Console handler writes to stderr; stdout carries the stdio transport
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(settings.log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    
    logging.getLogger("unreal_asset_scanner").setLevel(numeric_level)
