# SPDX-License-Identifier: MIT
"""gltfkit - resource codec, format defaults and color conversion for glTF."""

import logging

from gltfkit.errors import GltfError, MalformedPayloadError
from gltfkit.resources import decode, encode, is_embedded

__version__ = "0.1.0"
__all__ = [
    "GltfError",
    "MalformedPayloadError",
    "decode",
    "encode",
    "is_embedded",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
