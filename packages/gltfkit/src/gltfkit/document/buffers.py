# SPDX-License-Identifier: MIT
"""Buffers and images, the entities that own a resource reference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gltfkit.resources.data_uri import OCTET_STREAM, decode, encode, is_embedded


@dataclass
class Buffer:
    """A glTF buffer.

    ``uri`` is either a data URI or an external location; ``data`` holds
    the raw bytes once they are known.
    """

    uri: str = ""
    byte_length: int = 0
    data: bytes = field(default=b"", repr=False)
    name: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Buffer:
        """Create a Buffer from a parsed JSON object."""
        return cls(
            uri=d.get("uri") or "",
            byte_length=int(d.get("byteLength", 0)),
            name=d.get("name", ""),
        )

    def is_embedded_resource(self) -> bool:
        """Check whether the uri carries the data inline."""
        return is_embedded(self.uri)

    def marshal_data(self) -> bytes:
        """Decode the inline data, b"" when the uri is external."""
        return decode(self.uri)

    def embed_resource(self) -> None:
        """Overwrite the uri with a data URI holding ``data``."""
        self.uri = encode(self.data)


@dataclass
class Image:
    """A glTF image referenced by uri or stored in a buffer view."""

    uri: str = ""
    mime_type: str = ""
    buffer_view: int | None = None
    data: bytes = field(default=b"", repr=False)
    name: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Image:
        """Create an Image from a parsed JSON object."""
        return cls(
            uri=d.get("uri") or "",
            mime_type=d.get("mimeType", ""),
            buffer_view=d.get("bufferView"),
            name=d.get("name", ""),
        )

    def is_embedded_resource(self) -> bool:
        """Check whether the uri carries the image inline."""
        return is_embedded(self.uri)

    def marshal_data(self) -> bytes:
        """Decode the inline image, b"" when the uri is external."""
        return decode(self.uri)

    def embed_resource(self, data: bytes | None = None) -> None:
        """Overwrite the uri with a data URI.

        Args:
            data: Image bytes; defaults to ``data`` already on the image
        """
        if data is not None:
            self.data = data
        self.uri = encode(self.data, self.mime_type or OCTET_STREAM)
