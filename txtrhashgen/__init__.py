from .errors import (
    TextureHashError,
    MissingArgument,
    TextureNotFound,
    ShortRead,
    HeaderTruncated,
    PayloadTruncated,
    UnsupportedFormat,
    PalettizedUnsupported,
    OddDimensions,
    UsageError,
)
from .formats import SourceFormat, TargetFormat, map_format, compute_size, bits_per_pixel
from .header import HEADER_SIZE, TextureHeader, read_header, parse_header
from .identifier import format_identifier
from .texhash import TextureHash, hash_stream, hash_texture

__version__ = '1.0.0'
