"""
Byte stream copy helpers.

Every helper in this module is built on copy(), which moves bytes from a
binary source to a binary sink through a fixed-size buffer. Streams are
owned by the caller: nothing here opens, closes, seeks or flushes them.

Encoding arguments accept an encoding name, a codecs.CodecInfo, or None for
the process default encoding.
"""

import codecs
import errno
import io
import locale
from typing import BinaryIO, Optional, Union

from ..config.defaults import get_default_config
from ..errors import SliceBoundsError, UnsupportedEncodingError, require
from ..logging.config import get_stream_logger, log_copy_summary

COPY_BUFFER_SIZE = 1024

Encoding = Union[str, codecs.CodecInfo, None]
BytesLike = Union[bytes, bytearray, memoryview]


def copy(source: BinaryIO, sink: BinaryIO) -> int:
    """
    Copy all bytes of a source stream to a sink stream.

    Args:
        source: Readable binary stream, read until it returns b""
        sink: Writable binary stream

    Returns:
        Number of bytes copied

    Raises:
        PreconditionError: If source or sink is None
        OSError: If reading or writing fails; bytes already written stay written
    """
    require(source, "source")
    require(sink, "sink")

    copied = 0
    chunks = 0
    while True:
        chunk = source.read(COPY_BUFFER_SIZE)
        if not chunk:
            break
        _write_fully(sink, chunk)
        copied += len(chunk)
        chunks += 1

    log_copy_summary(get_stream_logger(__name__), copied, chunks)
    return copied


def _write_fully(sink: BinaryIO, chunk: bytes) -> None:
    # Raw streams may accept fewer bytes than offered
    view = memoryview(chunk)
    while view:
        written = sink.write(view)
        if not written:
            raise BlockingIOError(
                errno.EAGAIN,
                "Sink accepted no bytes",
                len(chunk) - len(view),
            )
        view = view[written:]


def read_bytes(source: BinaryIO) -> bytes:
    """Read all bytes of a source stream into memory."""
    buffer = io.BytesIO()
    copy(source, buffer)
    return buffer.getvalue()


def write_bytes(data: BytesLike, sink: BinaryIO) -> int:
    """
    Write a byte buffer to a sink stream.

    Returns:
        Number of bytes written, equal to len(data)
    """
    require(data, "data")
    return copy(io.BytesIO(data), sink)


def write_slice(data: BytesLike, offset: int, length: int, sink: BinaryIO) -> int:
    """
    Write the range [offset, offset + length) of a byte buffer to a sink stream.

    Raises:
        SliceBoundsError: If the range is negative or extends past the buffer
    """
    require(data, "data")
    size = len(data)
    if offset < 0 or length < 0 or offset + length > size:
        raise SliceBoundsError(
            f"Range [{offset}, {offset + length}) is outside a buffer of {size} bytes",
            offset=offset,
            length=length,
            size=size,
        )
    return copy(io.BytesIO(memoryview(data)[offset:offset + length]), sink)


def read_string(source: BinaryIO, encoding: Encoding = None,
                errors: Optional[str] = None) -> str:
    """
    Read all bytes of a source stream and decode them as text.

    Malformed byte sequences are handled by the given codec error handler,
    falling back to TextParams.decode_errors ("replace" substitutes U+FFFD).

    Args:
        source: Readable binary stream
        encoding: Encoding name, CodecInfo, or None for the default encoding
        errors: Codec error handler name, typically the "decode_errors" value
            of a merged configuration

    Raises:
        UnsupportedEncodingError: If the encoding is unknown or not a text encoding
        OSError: If reading fails
    """
    codec = _resolve_codec(encoding)
    data = read_bytes(source)
    if errors is None:
        errors = get_default_config().text.decode_errors
    return codec.decode(data, errors)[0]


def write_string(text: str, sink: BinaryIO, encoding: Encoding = None,
                 errors: Optional[str] = None) -> int:
    """
    Encode text and write it to a sink stream.

    Characters the encoding cannot represent are handled by the given codec
    error handler, falling back to TextParams.encode_errors ("replace"
    substitutes '?').

    Returns:
        Number of bytes written
    """
    require(text, "text")
    codec = _resolve_codec(encoding)
    if errors is None:
        errors = get_default_config().text.encode_errors
    return write_bytes(codec.encode(text, errors)[0], sink)


def get_default_encoding() -> str:
    """Return the name of the process default encoding."""
    return locale.getpreferredencoding(False)


def _resolve_codec(encoding: Encoding) -> codecs.CodecInfo:
    if isinstance(encoding, codecs.CodecInfo):
        codec = encoding
    else:
        name = get_default_encoding() if encoding is None else encoding
        try:
            codec = codecs.lookup(name)
        except LookupError as exc:
            raise UnsupportedEncodingError(
                f"Unsupported encoding: {name!r}", encoding=name
            ) from exc

    # bytes-to-bytes codecs such as base64 are registered but do not produce text
    if not getattr(codec, "_is_text_encoding", True):
        raise UnsupportedEncodingError(
            f"{codec.name!r} is not a text encoding", encoding=codec.name
        )
    return codec
