"""Naming-convention based asset classification.

Rules are evaluated top to bottom and the first matching rule wins. The order
matters: a ``.umap`` file is always a Level, whatever its name.
"""

from typing import Callable, List, Tuple

from .constants import UMAP_EXTENSION
from .models import AssetCategory

# (stem, extension) -> bool
AssetPredicate = Callable[[str, str], bool]


def _has_extension(extension: str) -> AssetPredicate:
    def predicate(stem: str, ext: str) -> bool:
        return ext == extension
    return predicate


def _has_prefix(prefix: str) -> AssetPredicate:
    def predicate(stem: str, ext: str) -> bool:
        return stem.startswith(prefix)
    return predicate


CLASSIFICATION_RULES: List[Tuple[AssetPredicate, AssetCategory]] = [
    (_has_extension(UMAP_EXTENSION), AssetCategory.LEVEL),
    (_has_prefix("BP_"), AssetCategory.BLUEPRINT),
    (_has_prefix("M_"), AssetCategory.MATERIAL),
    (_has_prefix("SM_"), AssetCategory.STATIC_MESH),
    (_has_prefix("T_"), AssetCategory.TEXTURE),
]

FALLBACK_CATEGORY = AssetCategory.ASSET


def classify_asset(
    stem: str,
    extension: str,
    rules: List[Tuple[AssetPredicate, AssetCategory]] = CLASSIFICATION_RULES
) -> AssetCategory:
    """Return the category of the first rule matching the file.
    
    Args:
        stem: File name without extension (case-sensitive)
        extension: File extension without the leading dot
        rules: Ordered (predicate, category) pairs
    
    Returns:
        The matched category, or AssetCategory.ASSET if no rule matches
    """
    for predicate, category in rules:
        if predicate(stem, extension):
            return category
    return FALLBACK_CATEGORY
