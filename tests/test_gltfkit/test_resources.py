# SPDX-License-Identifier: MIT
"""Tests for the embedded resource codec."""

import pytest


class TestClassify:
    """Tests for reference classification."""

    def test_classify_embedded(self):
        """Test splitting a data URI into media type and payload."""
        from gltfkit.resources.data_uri import EmbeddedResource, classify

        result = classify("data:image/png;base64,dsjdsaGGUDXGA")

        assert isinstance(result, EmbeddedResource)
        assert result.media_type == "image/png"
        assert result.payload == "dsjdsaGGUDXGA"

    def test_classify_media_type_parameters(self):
        """Test that media type parameters are stripped."""
        from gltfkit.resources.data_uri import classify

        result = classify("data:text/plain;charset=utf-8;base64,SGVsbG8=")

        assert result.media_type == "text/plain"
        assert result.payload == "SGVsbG8="

    def test_classify_external(self):
        """Test that anything else is external."""
        from gltfkit.resources.data_uri import ExternalResource, classify

        assert classify("https://web.com/a") == ExternalResource("https://web.com/a")
        assert classify("textures/wood.png") == ExternalResource("textures/wood.png")

    def test_data_uri_without_base64_marker(self):
        """Test that a data URI without base64 is not treated as embedded."""
        from gltfkit.resources.data_uri import ExternalResource, classify, is_embedded

        uri = "data:text/plain,hello"

        assert isinstance(classify(uri), ExternalResource)
        assert not is_embedded(uri)

    @pytest.mark.parametrize(
        "uri, expected",
        [
            ("data:application/octet-stream;base64,dsjdsaGGUDXGA", True),
            ("data:image/png;base64,dsjdsaGGUDXGA", True),
            ("data:image/jpeg;base64,", True),
            ("https://web.com/a", False),
            ("", False),
            ("buffer.bin", False),
            ("prefix data:image/png;base64,AAAA", False),
        ],
    )
    def test_is_embedded(self, uri, expected):
        """Test embedded detection on a range of references."""
        from gltfkit.resources.data_uri import is_embedded

        assert is_embedded(uri) is expected


class TestDecode:
    """Tests for decoding inline payloads."""

    def test_decode_external_is_empty(self):
        """Test that external references decode to nothing without error."""
        from gltfkit.resources.data_uri import decode

        assert decode("https://web.com/a") == b""
        assert decode("http://web.com") == b""

    def test_decode_empty_payload(self):
        """Test that an empty payload is a valid empty result."""
        from gltfkit.resources.data_uri import decode

        assert decode("data:application/octet-stream;base64,") == b""

    def test_decode_test_payload(self):
        """Test decoding a short payload to exact bytes."""
        from gltfkit.resources.data_uri import decode

        result = decode("data:application/octet-stream;base64,TEST")

        assert list(result) == [76, 68, 147]

    def test_decode_padded_payload(self):
        """Test decoding a padded payload."""
        from gltfkit.resources.data_uri import decode

        result = decode("data:application/octet-stream;base64,YW55IGNhcm5hbCBwbGVhcw==")

        assert result == b"any carnal pleas"

    def test_decode_invalid_character(self):
        """Test that characters outside the alphabet raise."""
        from gltfkit.errors import MalformedPayloadError
        from gltfkit.resources.data_uri import decode

        uri = "data:application/octet-stream;base64,_"

        with pytest.raises(MalformedPayloadError) as excinfo:
            decode(uri)

        assert excinfo.value.uri == uri

    def test_decode_bad_padding(self):
        """Test that truncated payloads raise."""
        from gltfkit.errors import MalformedPayloadError
        from gltfkit.resources.data_uri import decode

        with pytest.raises(MalformedPayloadError):
            decode("data:application/octet-stream;base64,YW55I")

    @pytest.mark.parametrize("payload", ["TEST==", "TEST====", "YQ==YQ==", "TE=ST", "YQ="])
    def test_decode_misplaced_padding(self, payload):
        """Test that surplus or interior padding raises."""
        from gltfkit.errors import MalformedPayloadError
        from gltfkit.resources.data_uri import decode

        with pytest.raises(MalformedPayloadError):
            decode("data:application/octet-stream;base64," + payload)

    def test_decode_padding_accepted(self):
        """Test that one or two trailing padding characters are fine."""
        from gltfkit.resources.data_uri import decode

        assert decode("data:application/octet-stream;base64,YQ==") == b"a"
        assert decode("data:application/octet-stream;base64,YWI=") == b"ab"

    def test_error_carries_reference_as_written(self):
        """Test that the error names the reference exactly as it appeared."""
        from gltfkit.errors import MalformedPayloadError
        from gltfkit.resources.data_uri import decode

        uri = "data:text/plain;charset=utf-8;base64,_"

        with pytest.raises(MalformedPayloadError) as excinfo:
            decode(uri)

        assert excinfo.value.uri == uri

    def test_malformed_payload_is_value_error(self):
        """Test that the error can be caught as a ValueError."""
        from gltfkit.errors import GltfError
        from gltfkit.resources.data_uri import decode

        with pytest.raises(ValueError):
            decode("data:image/png;base64,!!!!")
        with pytest.raises(GltfError):
            decode("data:image/png;base64,!!!!")


class TestEncode:
    """Tests for encoding bytes as data URIs."""

    def test_encode_octet_stream(self):
        """Test the canonical encoding of a byte string."""
        from gltfkit.resources.data_uri import encode

        result = encode(b"any + old & data")

        assert result == "data:application/octet-stream;base64,YW55ICsgb2xkICYgZGF0YQ=="

    def test_encode_empty(self):
        """Test encoding empty bytes."""
        from gltfkit.resources.data_uri import encode, is_embedded

        result = encode(b"")

        assert result == "data:application/octet-stream;base64,"
        assert is_embedded(result)

    def test_encode_media_type(self):
        """Test encoding with another media type."""
        from gltfkit.resources.data_uri import encode

        assert encode(b"\x89PNG", "image/png") == "data:image/png;base64,iVBORw=="

    @pytest.mark.parametrize("data", [b"", b"\x00", b"ab", bytes(range(256))])
    def test_roundtrip(self, data):
        """Test that decoding an encoded payload gives the bytes back."""
        from gltfkit.resources.data_uri import decode, encode, is_embedded

        uri = encode(data)

        assert is_embedded(uri)
        assert decode(uri) == data
        assert encode(data) == uri


class TestBuffer:
    """Tests for Buffer resource handling."""

    def test_is_embedded_resource(self):
        """Test embedded detection on buffers."""
        from gltfkit.document.buffers import Buffer

        assert Buffer(uri="data:application/octet-stream;base64,dsjdsaGGUDXGA").is_embedded_resource()
        assert not Buffer(uri="https://web.com/a").is_embedded_resource()

    def test_embed_resource(self):
        """Test that embedding overwrites the uri and keeps the data."""
        from gltfkit.document.buffers import Buffer

        buffer = Buffer(uri="buffer.bin", data=b"any + old & data")

        buffer.embed_resource()

        assert buffer.uri == "data:application/octet-stream;base64,YW55ICsgb2xkICYgZGF0YQ=="
        assert buffer.data == b"any + old & data"

    def test_marshal_data(self):
        """Test decoding buffer data."""
        from gltfkit.document.buffers import Buffer

        assert Buffer(uri="data:application/octet-stream;base64,TEST").marshal_data() == bytes(
            [76, 68, 147]
        )
        assert Buffer(uri="http://web.com").marshal_data() == b""

    def test_from_dict(self):
        """Test building a buffer from JSON."""
        from gltfkit.document.buffers import Buffer

        buffer = Buffer.from_dict({"uri": "mesh.bin", "byteLength": 1024, "name": "geo"})

        assert buffer.uri == "mesh.bin"
        assert buffer.byte_length == 1024
        assert buffer.name == "geo"
        assert buffer.data == b""

    def test_from_dict_null_uri(self):
        """Test that a null uri is read as an empty reference."""
        from gltfkit.document.buffers import Buffer

        buffer = Buffer.from_dict({"uri": None, "byteLength": 4})

        assert buffer.uri == ""
        assert not buffer.is_embedded_resource()
        assert buffer.marshal_data() == b""


class TestImage:
    """Tests for Image resource handling."""

    @pytest.mark.parametrize(
        "uri, expected",
        [
            ("data:image/png;base64,dsjdsaGGUDXGA", True),
            ("data:image/jpeg;base64,dsjdsaGGUDXGA", True),
            ("https://web.com/a", False),
        ],
    )
    def test_is_embedded_resource(self, uri, expected):
        """Test embedded detection on images."""
        from gltfkit.document.buffers import Image

        assert Image(uri=uri).is_embedded_resource() is expected

    def test_embed_resource_uses_mime_type(self):
        """Test that the image mime type ends up in the data URI."""
        from gltfkit.document.buffers import Image

        image = Image(mime_type="image/png")

        image.embed_resource(b"\x89PNG")

        assert image.uri == "data:image/png;base64,iVBORw=="
        assert image.data == b"\x89PNG"

    def test_embed_resource_without_mime_type(self):
        """Test that images without a mime type embed as octet-stream."""
        from gltfkit.document.buffers import Image

        image = Image(data=b"ab")

        image.embed_resource()

        assert image.uri == "data:application/octet-stream;base64,YWI="

    def test_from_dict(self):
        """Test building an image from JSON."""
        from gltfkit.document.buffers import Image

        image = Image.from_dict({"bufferView": 3, "mimeType": "image/jpeg"})

        assert image.uri == ""
        assert image.buffer_view == 3
        assert image.mime_type == "image/jpeg"

    def test_from_dict_null_uri(self):
        """Test that a null uri is read as an empty reference."""
        from gltfkit.document.buffers import Image

        image = Image.from_dict({"uri": None, "bufferView": 0})

        assert image.uri == ""
        assert not image.is_embedded_resource()


class TestLoader:
    """Tests for batch population of resources."""

    def test_load_embedded_buffers(self):
        """Test that embedded buffers are decoded and external ones deferred."""
        from gltfkit.document.buffers import Buffer
        from gltfkit.resources.loader import load_embedded_buffers

        embedded = Buffer(uri="data:application/octet-stream;base64,TEST")
        external = Buffer(uri="https://web.com/a.bin", byte_length=12)
        empty = Buffer(uri="data:application/octet-stream;base64,")

        deferred = load_embedded_buffers([embedded, external, empty])

        assert deferred == [external]
        assert embedded.data == bytes([76, 68, 147])
        assert embedded.byte_length == 3
        assert empty.data == b""
        assert external.data == b""

    def test_load_keeps_declared_length(self):
        """Test that a declared byte length is not overwritten."""
        from gltfkit.document.buffers import Buffer
        from gltfkit.resources.loader import load_embedded_buffers

        buffer = Buffer(uri="data:application/octet-stream;base64,TEST", byte_length=4)

        load_embedded_buffers([buffer])

        assert buffer.byte_length == 4

    def test_load_skips_populated_buffers(self):
        """Test that buffers already holding data are left alone."""
        from gltfkit.document.buffers import Buffer
        from gltfkit.resources.loader import load_embedded_buffers

        buffer = Buffer(uri="https://web.com/a.bin", data=b"cached")

        assert load_embedded_buffers([buffer]) == []
        assert buffer.data == b"cached"

    def test_load_malformed_buffer_raises(self):
        """Test that a malformed payload propagates."""
        from gltfkit.document.buffers import Buffer
        from gltfkit.errors import MalformedPayloadError
        from gltfkit.resources.loader import load_embedded_buffers

        with pytest.raises(MalformedPayloadError):
            load_embedded_buffers([Buffer(uri="data:application/octet-stream;base64,_")])

    def test_load_embedded_images(self):
        """Test that embedded images are decoded and others skipped or deferred."""
        from gltfkit.document.buffers import Image
        from gltfkit.resources.loader import load_embedded_images

        embedded = Image(uri="data:image/png;base64,iVBORw==")
        external = Image(uri="textures/wood.png")
        in_buffer = Image(buffer_view=0, mime_type="image/png")

        deferred = load_embedded_images([embedded, external, in_buffer])

        assert deferred == [external]
        assert embedded.data == b"\x89PNG"
        assert in_buffer.data == b""

    def test_embed_buffers(self):
        """Test embedding every buffer that holds data."""
        from gltfkit.document.buffers import Buffer
        from gltfkit.resources.data_uri import decode
        from gltfkit.resources.loader import embed_buffers

        full = Buffer(uri="a.bin", data=b"payload")
        empty = Buffer(uri="b.bin")

        count = embed_buffers([full, empty])

        assert count == 1
        assert decode(full.uri) == b"payload"
        assert empty.uri == "b.bin"
