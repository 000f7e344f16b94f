import struct
from dataclasses import dataclass

from .byteorder import to_host16, to_host32
from .errors import HeaderTruncated

# format:int32 width:uint16 height:uint16 mipmapCount:uint32, loaded as-is
HEADER_STRUCT = struct.Struct('=IHHI')
HEADER_SIZE = HEADER_STRUCT.size


@dataclass
class TextureHeader:
    format: int
    width: int
    height: int
    mipmap_count: int

    @property
    def has_mipmaps(self):
        return self.mipmap_count > 1


def parse_header(data, byteorder='little'):
    if len(data) < HEADER_SIZE:
        raise HeaderTruncated(HEADER_SIZE, len(data))
    fmt, width, height, mipmap_count = HEADER_STRUCT.unpack_from(data)
    fmt = to_host32(fmt, byteorder)
    # The format word is signed on disk
    if fmt & 0x80000000:
        fmt -= 0x100000000
    return TextureHeader(
        format=fmt,
        width=to_host16(width, byteorder),
        height=to_host16(height, byteorder),
        mipmap_count=to_host32(mipmap_count, byteorder)
    )


def read_header(stream, byteorder='little'):
    return parse_header(stream.read(HEADER_SIZE), byteorder)
