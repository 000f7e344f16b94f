from dataclasses import dataclass

import xxhash

from .errors import PayloadTruncated, TextureNotFound, UnsupportedFormat
from .formats import SourceFormat, TargetFormat, compute_size, map_format
from .header import TextureHeader, read_header
from .identifier import format_identifier

HASH_SEED = 0


@dataclass
class TextureHash:
    header: TextureHeader
    target: TargetFormat
    size: int
    digest: int
    identifier: str


def _trace(log, message):
    if log is not None:
        log(message)


def hash_stream(stream, byteorder='little', log=None):
    """Hash the base level of a TXTR texture read from an open binary stream."""
    header = read_header(stream, byteorder)
    _trace(log, f'Header: format {header.format}, {header.width}x{header.height}, {header.mipmap_count} mipmaps')

    target = map_format(header.format)
    if target == TargetFormat.INVALID:
        raise UnsupportedFormat(header.format)
    _trace(log, f'Format: {SourceFormat(header.format).name} -> {target.name} ({int(target)})')

    size = compute_size(header.format, header.width, header.height)
    _trace(log, f'Payload: {size} bytes')

    data = stream.read(size)
    if len(data) != size:
        raise PayloadTruncated(size, len(data))

    digest = xxhash.xxh64(data, seed=HASH_SEED).intdigest()
    identifier = format_identifier(header.width, header.height, header.has_mipmaps, digest, target)
    return TextureHash(header, target, size, digest, identifier)


def hash_texture(path, byteorder='little', log=None):
    try:
        f = open(path, 'rb')
    except OSError:
        raise TextureNotFound(path) from None
    with f:
        return hash_stream(f, byteorder, log)
