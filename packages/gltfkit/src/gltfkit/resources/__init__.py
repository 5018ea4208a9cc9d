# SPDX-License-Identifier: MIT
"""Embedded resource codec."""

from .data_uri import (
    EmbeddedResource,
    ExternalResource,
    classify,
    decode,
    encode,
    is_embedded,
)
from .loader import embed_buffers, load_embedded_buffers, load_embedded_images

__all__ = [
    "EmbeddedResource",
    "ExternalResource",
    "classify",
    "decode",
    "encode",
    "is_embedded",
    "load_embedded_buffers",
    "load_embedded_images",
    "embed_buffers",
]
