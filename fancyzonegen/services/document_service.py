"""Document Service - Reads, inspects and rewrites custom-layouts.json."""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from fancyzonegen.errors import ConfigFileMissingError
from fancyzonegen.schemas.layout import Zone

logger = logging.getLogger(__name__)

CANVAS_TYPE = "canvas"

# Presence checks only; everything else in the file is passed through untouched.
DOCUMENT_SCHEMA = {
    "type": "object",
    "required": ["custom-layouts"],
    "properties": {
        "custom-layouts": {
            "type": "array",
            "items": {
                "anyOf": [
                    {"type": "null"},
                    {
                        "type": "object",
                        "required": ["type"],
                        "properties": {"type": {"type": "string"}},
                    },
                ],
            },
        },
    },
}


class LayoutDocument:
    """The parsed layouts file together with the bytes it was parsed from."""

    def __init__(self, path: Path, raw: bytes):
        self.path = Path(path)
        self.raw = raw
        self.content_hash = hashlib.md5(raw).hexdigest().upper()
        self.data: Any = json.loads(raw)

    @classmethod
    def load(cls, path: Path) -> "LayoutDocument":
        """Read and parse the file at ``path``.

        Raises:
            ConfigFileMissingError: if no file exists at ``path``.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigFileMissingError()

        raw = path.read_bytes()
        document = cls(path, raw)
        logger.debug(f"Read {len(raw)} bytes from {path} (md5 {document.content_hash})")
        return document

    def layouts(self) -> list[dict]:
        """All entries of ``custom-layouts``.

        Raises ``jsonschema.ValidationError`` when the array is absent.
        """
        Draft202012Validator(DOCUMENT_SCHEMA).validate(self.data)
        return self.data["custom-layouts"]

    def canvas_layouts(self) -> list[dict]:
        """Entries of ``custom-layouts`` with type ``canvas``, in file order."""
        canvas = [
            layout
            for layout in self.layouts()
            if layout is not None and layout["type"] == CANVAS_TYPE
        ]
        logger.debug(f"Found {len(canvas)} canvas layouts")
        return canvas

    def replace_zones(self, layout: dict, zones: list[Zone]) -> None:
        """Replace ``info.zones`` of ``layout`` (an entry of this document)."""
        layout["info"]["zones"] = [zone.model_dump() for zone in zones]

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.data, ensure_ascii=False, indent=indent)

    def save(self, indent: int = 2) -> None:
        """Write the whole document back to its original path."""
        text = self.to_json(indent=indent)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Wrote {self.path}")
