"""
Graph Client Upload Descriptors

Binds a file path, raw bytes or an open binary stream to a content type so it
can be sent as an ordinary request parameter (conventionally under "source").
"""

from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union


class UploadableIO:
    """A readable byte source with a declared content type."""

    def __init__(self, source: Union[str, Path, bytes, BinaryIO], content_type: str,
                 filename: Optional[str] = None):
        if isinstance(source, UploadableIO):
            raise TypeError("source is already an UploadableIO")

        if isinstance(source, (str, Path)):
            self.file_path: Optional[Path] = Path(source)
            if not self.file_path.exists():
                raise FileNotFoundError(f"File not found: {self.file_path}")
            self.stream: Optional[BinaryIO] = None
            self.data: Optional[bytes] = None
            self._filename = filename or self.file_path.name
        elif isinstance(source, bytes):
            self.file_path = None
            self.stream = None
            self.data = source
            self._filename = filename
        elif hasattr(source, 'read'):
            self.file_path = None
            self.stream = source
            self.data = None
            name = getattr(source, 'name', None)
            self._filename = filename or (Path(name).name if isinstance(name, str) else None)
        else:
            raise TypeError(f"Unsupported upload source type: {type(source)}")

        self.content_type = content_type

    @property
    def filename(self) -> str:
        """Return the filename sent with the multipart part."""
        return self._filename or 'upload'

    @property
    def content_length(self) -> Optional[int]:
        """Return the content length if it is known without reading."""
        if self.file_path is not None:
            return self.file_path.stat().st_size
        if self.data is not None:
            return len(self.data)
        return None

    def read(self) -> Union[bytes, BinaryIO]:
        """Return the content: bytes for paths and raw data, the stream itself otherwise."""
        if self.file_path is not None:
            return self.file_path.read_bytes()
        if self.data is not None:
            return self.data
        return self.stream

    def to_file_tuple(self) -> Tuple[str, Union[bytes, BinaryIO], str]:
        """Return a (filename, content, content_type) tuple for multipart encoding."""
        return self.filename, self.read(), self.content_type

    def __repr__(self) -> str:
        return f"UploadableIO(filename={self.filename!r}, content_type={self.content_type!r})"
