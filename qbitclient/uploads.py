# qbitclient/uploads.py
"""
Inputs accepted by torrents/add.

A torrent to add is one of four variants. `classify` maps loose caller input
(strings, paths, bytes, file objects) onto them once, at the API boundary;
past that point the code dispatches on the variant, not on raw types.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, AsyncIterable, Union

TORRENT_CONTENT_TYPE = "application/x-bittorrent"
URL_SCHEMES = ("http://", "https://", "magnet:", "bc://bt/")


@dataclass(frozen=True)
class UrlReference:
    """An http(s) URL, magnet link or bc://bt/ link, forwarded as text."""

    url: str


@dataclass(frozen=True)
class LocalPath:
    """A .torrent file on local disk."""

    path: Union[str, os.PathLike]

    @property
    def filename(self) -> str:
        return Path(self.path).name

    async def read(self) -> bytes:
        # Plain blocking read; .torrent files are small
        with open(self.path, "rb") as f:
            return f.read()


@dataclass(frozen=True)
class InMemoryBytes:
    data: bytes
    filename: str = "upload.torrent"

    async def read(self) -> bytes:
        return bytes(self.data)


@dataclass(frozen=True)
class ByteStream:
    """A binary file object or async iterable of bytes, drained fully before upload."""

    stream: Union[IO[bytes], AsyncIterable[bytes]]
    filename: str = "upload.torrent"

    async def read(self) -> bytes:
        if hasattr(self.stream, "__aiter__"):
            chunks = [chunk async for chunk in self.stream]
            return b"".join(chunks)
        return self.stream.read()


TorrentInput = Union[UrlReference, LocalPath, InMemoryBytes, ByteStream]
TorrentFileInput = Union[LocalPath, InMemoryBytes, ByteStream]


def is_url(value: str) -> bool:
    return value.startswith(URL_SCHEMES)


def classify(item: Any) -> TorrentInput:
    """
    Maps one caller-supplied torrent onto its variant.

    Strings with a supported URL scheme become UrlReference, other strings and
    path-like objects become LocalPath, raw bytes become InMemoryBytes and
    readable objects or async byte iterables become ByteStream.

    Raises:
        TypeError: If the item matches none of the above
    """
    if isinstance(item, (UrlReference, LocalPath, InMemoryBytes, ByteStream)):
        return item
    if isinstance(item, str):
        return UrlReference(item) if is_url(item) else LocalPath(item)
    if isinstance(item, os.PathLike):
        return LocalPath(item)
    if isinstance(item, (bytes, bytearray, memoryview)):
        return InMemoryBytes(bytes(item))
    if hasattr(item, "read") or hasattr(item, "__aiter__"):
        name = getattr(item, "name", None)
        if isinstance(name, str) and name:
            return ByteStream(item, filename=os.path.basename(name))
        return ByteStream(item)
    raise TypeError(f"Unsupported torrent input: {type(item).__name__}")


async def to_multipart_part(item: TorrentFileInput) -> tuple:
    """Builds one httpx multipart part for the repeated `torrents` field."""
    content = await item.read()
    return ("torrents", (item.filename, content, TORRENT_CONTENT_TYPE))
