# SPDX-License-Identifier: MIT
"""Populate buffers and images from their embedded resources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from gltfkit.document.buffers import Buffer, Image

logger = logging.getLogger(__name__)


def load_embedded_buffers(buffers: Iterable[Buffer]) -> list[Buffer]:
    """Decode every embedded buffer in place.

    Buffers that already hold data are left alone. A buffer without a
    declared byte length gets the decoded length.

    Args:
        buffers: Buffers from a parsed document

    Returns:
        The buffers whose uri is external and still has to be fetched

    Raises:
        MalformedPayloadError: If an embedded payload is not valid base64
    """
    deferred = []

    for index, buffer in enumerate(buffers):
        if buffer.data:
            continue
        if not buffer.is_embedded_resource():
            logger.debug("Deferring external buffer %d: %s", index, buffer.uri)
            deferred.append(buffer)
            continue

        buffer.data = buffer.marshal_data()
        if not buffer.byte_length:
            buffer.byte_length = len(buffer.data)

    return deferred


def load_embedded_images(images: Iterable[Image]) -> list[Image]:
    """Decode every embedded image in place.

    Images stored in a buffer view carry no uri and are neither decoded
    nor deferred.

    Args:
        images: Images from a parsed document

    Returns:
        The images whose uri is external and still has to be fetched

    Raises:
        MalformedPayloadError: If an embedded payload is not valid base64
    """
    deferred = []

    for index, image in enumerate(images):
        if image.data or not image.uri:
            continue
        if not image.is_embedded_resource():
            logger.debug("Deferring external image %d: %s", index, image.uri)
            deferred.append(image)
            continue

        image.data = image.marshal_data()

    return deferred


def embed_buffers(buffers: Iterable[Buffer]) -> int:
    """Rewrite the uri of every buffer holding data as a data URI.

    Returns:
        Number of buffers that were embedded
    """
    count = 0
    for buffer in buffers:
        if buffer.data:
            buffer.embed_resource()
            count += 1
    return count
