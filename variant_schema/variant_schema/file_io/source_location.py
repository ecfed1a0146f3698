from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..utils.json_pointer import JsonPointer


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    instance_path: Optional[JsonPointer] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    instance_path: Optional[JsonPointer],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Find the line/column of *instance_path*.

    A path missing from the map (e.g. a required member that is absent) falls
    back to its nearest ancestor that is present.
    """
    if not source_map or instance_path is None:
        return SourceLocation(file_path=file_path, instance_path=instance_path)

    probe = instance_path
    entry = source_map.get(probe)
    while entry is None and probe:
        probe = probe.rsplit("/", 1)[0]
        entry = source_map.get(probe)

    if not entry:
        return SourceLocation(file_path=file_path, instance_path=instance_path)

    return SourceLocation(
        file_path=file_path,
        instance_path=instance_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )
