# SPDX-License-Identifier: MIT
"""Error types raised by gltfkit."""

from __future__ import annotations


class GltfError(Exception):
    """Base class for gltfkit errors."""


class MalformedPayloadError(GltfError, ValueError):
    """An embedded resource carries a payload that is not valid base64."""

    def __init__(self, uri: str, reason: str = "invalid base64 payload"):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Malformed embedded payload in {_abbreviate(uri)}: {reason}")


def _abbreviate(uri: str, limit: int = 64) -> str:
    # Payloads can be megabytes long
    if len(uri) <= limit:
        return repr(uri)
    return repr(uri[:limit] + "...")
