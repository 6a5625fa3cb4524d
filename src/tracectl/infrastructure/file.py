"""Resource documents read from disk or stdin.

A resource file holds one API payload: either plain JSON as returned by
the API, or YAML in the ``type``/``spec`` envelope the platform uses for
resource definitions.  Decoders always receive JSON, so YAML documents
are re-encoded on the way through.
"""

from __future__ import annotations

import json
import sys
from functools import cached_property
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from tracectl.domain.errors import ResourceDecodeError, ResourceFileError

STDIN_PATH = "-"


class ResourceFile:
    """A single resource document and its raw contents."""

    def __init__(self, contents: str, *, path: str = STDIN_PATH) -> None:
        self.path = path
        self._contents = contents

    @classmethod
    def read(cls, path: str | Path) -> ResourceFile:
        """Read *path*, or stdin when *path* is ``"-"``.

        Raises:
            ResourceFileError: the file is missing or unreadable.
        """
        if str(path) == STDIN_PATH:
            return cls(sys.stdin.read())
        p = Path(path)
        try:
            contents = p.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as exc:
            raise ResourceFileError(f"Cannot read {p}: {exc}") from exc
        return cls(contents, path=str(p))

    @classmethod
    def from_text(cls, text: str, *, path: str = STDIN_PATH) -> ResourceFile:
        return cls(text, path=path)

    def contents(self) -> str:
        """Raw document text, exactly as read."""
        return self._contents

    @cached_property
    def _parsed(self) -> tuple[Any, bool]:
        """``(document, is_json)``; YAML is tried when JSON parsing fails."""
        try:
            return json.loads(self._contents), True
        except json.JSONDecodeError:
            pass
        try:
            return YAML(typ="safe").load(self._contents), False
        except YAMLError as exc:
            kind = "JSON" if self._contents.lstrip().startswith(("{", "[")) else "YAML"
            raise ResourceDecodeError(f"Invalid {kind} in {self.path}: {exc}") from exc

    @property
    def is_json(self) -> bool:
        """True only when the text parses as JSON as-is."""
        return self._parsed[1]

    @property
    def data(self) -> Any:
        """The parsed document.

        Raises:
            ResourceDecodeError: the document is neither valid JSON nor YAML.
        """
        return self._parsed[0]

    def json_contents(self) -> str:
        """The document as JSON text; JSON input is returned untouched."""
        if self.is_json:
            return self._contents
        return json.dumps(self.data, default=str)

    @property
    def resource_type(self) -> str | None:
        """Top-level ``type`` of the envelope, or None for bare payloads."""
        data = self.data
        if isinstance(data, dict):
            value = data.get("type")
            return str(value) if value is not None else None
        return None

    def __repr__(self) -> str:
        return f"ResourceFile(path={self.path!r})"
