# SPDX-License-Identifier: MIT
"""Classify, decode and encode embedded (data URI) resources."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass, field

from gltfkit.errors import MalformedPayloadError

logger = logging.getLogger(__name__)

# Data URI layout: data:<mimetype>;base64,<payload>
DATA_PREFIX = "data:"
BASE64_MARKER = ";base64,"
OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class EmbeddedResource:
    """A resource carried inline as base64 text."""

    media_type: str
    payload: str  # base64 text, not yet decoded
    uri: str = field(default="", compare=False)  # reference as written in the document

    def decode(self) -> bytes:
        """Decode the base64 payload.

        Returns:
            The raw bytes, empty when the payload is empty

        Raises:
            MalformedPayloadError: If the payload is not strict padded base64
        """
        if not self.payload:
            return b""
        try:
            _check_padding(self.payload)
            return base64.b64decode(self.payload, validate=True)
        except binascii.Error as e:
            logger.warning("Failed to decode embedded %s payload: %s", self.media_type, e)
            raise MalformedPayloadError(self.uri or self.to_uri(), str(e)) from e

    def to_uri(self) -> str:
        return f"{DATA_PREFIX}{self.media_type}{BASE64_MARKER}{self.payload}"


def _check_padding(payload: str) -> None:
    # b64decode(validate=True) checks the alphabet but tolerates surplus "="
    if len(payload) % 4:
        raise binascii.Error(f"payload length {len(payload)} is not a multiple of 4")
    data = payload.rstrip("=")
    if len(payload) - len(data) > 2 or "=" in data:
        raise binascii.Error("padding is only allowed as the last one or two characters")


@dataclass(frozen=True)
class ExternalResource:
    """A resource that has to be fetched from somewhere else."""

    uri: str


def classify(uri: str) -> EmbeddedResource | ExternalResource:
    """Split a reference string into its embedded or external form.

    Classification is purely syntactic; nothing is fetched.

    Args:
        uri: The reference string from a buffer or image

    Returns:
        EmbeddedResource for data URIs with a base64 marker,
        ExternalResource for anything else
    """
    if not uri.startswith(DATA_PREFIX):
        return ExternalResource(uri)

    marker = uri.find(BASE64_MARKER)
    if marker == -1:
        return ExternalResource(uri)

    header = uri[len(DATA_PREFIX) : marker]
    # Drop media type parameters (data:image/png;charset=x;base64,...)
    media_type = header.split(";", 1)[0]
    payload = uri[marker + len(BASE64_MARKER) :]
    return EmbeddedResource(media_type=media_type, payload=payload, uri=uri)


def is_embedded(uri: str) -> bool:
    """Check whether a reference carries its data inline."""
    return isinstance(classify(uri), EmbeddedResource)


def decode(uri: str) -> bytes:
    """Decode the inline data of a reference.

    External references are not an error: they decode to empty bytes and
    the caller is expected to fetch them. An embedded reference with an
    empty payload also decodes to empty bytes, so use is_embedded() to
    tell the two apart.

    Args:
        uri: The reference string

    Returns:
        Decoded bytes, or b"" when the reference is external

    Raises:
        MalformedPayloadError: If the embedded payload is not valid base64
    """
    resource = classify(uri)
    if isinstance(resource, ExternalResource):
        return b""

    data = resource.decode()
    logger.debug("Decoded %d bytes of %s", len(data), resource.media_type)
    return data


def encode(data: bytes, media_type: str = OCTET_STREAM) -> str:
    """Encode raw bytes as an embedded reference.

    Args:
        data: Raw payload, may be empty
        media_type: Media type placed in the data URI header

    Returns:
        A data URI with a padded standard base64 payload
    """
    payload = base64.b64encode(bytes(data)).decode("ascii")
    logger.debug("Encoded %d bytes as %s", len(data), media_type)
    return EmbeddedResource(media_type=media_type, payload=payload).to_uri()
