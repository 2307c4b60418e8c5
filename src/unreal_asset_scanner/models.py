"""Data model for scanned Unreal assets."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class AssetCategory(str, Enum):
    """Asset type inferred from file extension and naming convention."""
    LEVEL = "Level"
    BLUEPRINT = "Blueprint"
    MATERIAL = "Material"
    STATIC_MESH = "StaticMesh"
    TEXTURE = "Texture"
    ASSET = "Asset"


class AssetRecord(BaseModel):
    """A single asset found under a project's Content folder.

    Serialized field names follow the catalog format consumed by callers:
    ``path`` is the virtual path, ``file_path`` the file on disk and
    ``asset_type`` the category.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    virtual_path: str = Field(alias="path")
    absolute_path: str = Field(alias="file_path")
    category: AssetCategory = Field(alias="asset_type")

    def to_dict(self) -> Dict[str, str]:
        """Flat dictionary with the four string fields."""
        return {
            "name": self.name,
            "path": self.virtual_path,
            "file_path": self.absolute_path,
            "asset_type": self.category.value,
        }


class ScanReport(BaseModel):
    """Result of a scan together with the number of entries dropped on the way."""
    assets: List[AssetRecord] = Field(default_factory=list)
    skipped: int = 0
