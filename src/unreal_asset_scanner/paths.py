"""Translation between filesystem paths and Unreal virtual asset paths."""

from pathlib import PurePath
from typing import Optional, Union

from .constants import VIRTUAL_ROOT


def relative_to_content(file_path: Union[str, PurePath], content_root: Union[str, PurePath]) -> Optional[PurePath]:
    """Path of a file relative to the content root, or None if it is not nested under it."""
    try:
        return PurePath(file_path).relative_to(PurePath(content_root))
    except ValueError:
        return None


def to_virtual_path(relative_path: Union[str, PurePath]) -> str:
    """Build the /Game/ reference for a path relative to the content root.

    Backslashes become forward slashes and the final extension is removed by
    splitting on the last '.' of the whole virtual path.

    >>> to_virtual_path("Sub\\\\Foo.uasset")
    '/Game/Sub/Foo'
    """
    normalized = str(relative_path).replace("\\", "/")
    virtual_path = f"{VIRTUAL_ROOT}{normalized}"
    head, dot, _ = virtual_path.rpartition(".")
    return head if dot else virtual_path
