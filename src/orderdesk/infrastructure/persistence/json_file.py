"""A JSON array of backend documents kept in one file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

Document = dict[str, Any]


class JsonDocumentFile:

    def __init__(self, path: Path) -> None:
        self.path = path
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")

    def read(self) -> list[Document]:
        documents = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(documents, list):
            raise ValueError(f"{self.path} does not hold a JSON array")
        return documents

    def write(self, documents: list[Document]) -> None:
        self.path.write_text(json.dumps(documents, indent=2) + "\n", encoding="utf-8")

    def append(self, document: Document) -> None:
        documents = self.read()
        documents.append(document)
        self.write(documents)
