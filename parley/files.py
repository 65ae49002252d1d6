from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional


@dataclass
class File:
    fp: BinaryIO
    filename: str
    content_type: Optional[str] = None
    description: Optional[str] = None
    spoiler: bool = False

    def __post_init__(self) -> None:
        if self.spoiler and not self.filename.startswith("SPOILER_"):
            self.filename = f"SPOILER_{self.filename}"

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        description: Optional[str] = None,
        spoiler: bool = False,
    ) -> "File":
        p = Path(path)
        fp = p.open("rb")
        return cls(
            fp=fp,
            filename=filename or p.name,
            content_type=content_type,
            description=description,
            spoiler=spoiler,
        )

    def attachment(self, index: int) -> Dict[str, Any]:
        item: Dict[str, Any] = {"id": index, "filename": self.filename}
        if self.description is not None:
            item["description"] = self.description
        return item

    def to_form(self, form, index: int) -> None:
        form.add_field(
            f"files[{index}]",
            self.fp,
            filename=self.filename,
            content_type=self.content_type,
        )

    def close(self) -> None:
        self.fp.close()
