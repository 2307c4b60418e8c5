"""Quick search over a scanned asset catalog."""

from typing import Iterable, List

from .constants import DEFAULT_SEARCH_MAX_RESULTS
from .models import AssetRecord


def search_assets(
    assets: Iterable[AssetRecord],
    query: str,
    limit: int = DEFAULT_SEARCH_MAX_RESULTS
) -> List[AssetRecord]:
    """Find assets whose name or virtual path contains ``query``, ignoring case.
    
    Args:
        assets: Catalog to search, in the order results should be returned
        query: Substring to look for. An empty query matches nothing.
        limit: Maximum number of results; zero or negative means unlimited
    
    Returns:
        Matching assets in catalog order
    """
    if not query:
        return []

    needle = query.lower()
    matches = []
    for asset in assets:
        if needle in asset.name.lower() or needle in asset.virtual_path.lower():
            matches.append(asset)
            if 0 < limit <= len(matches):
                break
    return matches
