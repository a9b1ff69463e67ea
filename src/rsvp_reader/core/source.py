"""Input file abstraction shared by the parsers."""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union


@dataclass
class DocumentSource:
    """A named document whose bytes are read on demand.

    The name is only used to sniff the format from its extension. Exactly
    one of ``path``, ``file`` or ``data`` supplies the content.
    """

    name: str
    path: Path | None = None
    file: BinaryIO | None = None
    data: bytes | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> "DocumentSource":
        path = Path(path)
        return cls(name=path.name, path=path)

    @classmethod
    def from_file(cls, file: BinaryIO, name: str | None = None) -> "DocumentSource":
        """Wrap an open binary file; ``name`` overrides ``file.name``."""
        file_name = name or getattr(file, "name", "") or ""
        return cls(name=Path(str(file_name)).name, file=file)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "DocumentSource":
        return cls(name=name, data=data)

    @classmethod
    def coerce(cls, source: "SourceLike") -> "DocumentSource":
        if isinstance(source, DocumentSource):
            return source
        if isinstance(source, (str, Path)):
            return cls.from_path(source)
        return cls.from_file(source)

    @property
    def suffix(self) -> str:
        """Lower-cased extension including the dot."""
        return Path(self.name).suffix.lower()

    def read_bytes(self) -> bytes:
        """Return the full binary content.

        A file object can only be consumed once, so its bytes are kept.
        """
        if self.data is not None:
            return self.data
        if self.path is not None:
            return self.path.read_bytes()
        if self.file is not None:
            self.data = self.file.read()
            return self.data
        return b""


SourceLike = Union[DocumentSource, Path, str, BinaryIO]
