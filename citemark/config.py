from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .data import sources_from_records
from .errors import InvalidSourceError
from .types import Source

_KNOWN_KEYS = {"text", "text_file", "sources", "log_level", "log_file"}


@dataclass
class AnnotationJob:
    text: str
    sources: List[Source]
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


def load_annotation_job(path: str | Path) -> AnnotationJob:
    """
    Load a YAML job holding ``text`` (or ``text_file``, relative to the
    config) and a ``sources`` list in the upstream record shape.
    """
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise InvalidSourceError(f"{path}: expected a mapping at the top level")

    if data.get("text") is not None:
        text = str(data["text"])
    elif data.get("text_file"):
        text = (path.parent / data["text_file"]).read_text(encoding="utf-8")
    else:
        raise InvalidSourceError(f"{path}: one of 'text' or 'text_file' is required")

    if "sources" not in data:
        raise InvalidSourceError(f"{path}: 'sources' is required")

    return AnnotationJob(
        text=text,
        sources=sources_from_records(data["sources"] or []),
        log_level=data.get("log_level", "INFO"),
        log_file=data.get("log_file"),
        extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
    )
