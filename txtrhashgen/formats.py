from enum import IntEnum

from .errors import OddDimensions, PalettizedUnsupported, UnsupportedFormat


# Retro's texture formats, the ordinal is what the TXTR header stores
class SourceFormat(IntEnum):
    I4 = 0
    I8 = 1
    IA4 = 2
    IA8 = 3
    IDX4 = 4
    IDX8 = 5
    RGB564 = 6 # Reserved, only keeps the ordinals aligned
    RGB565 = 7
    RGB5A3 = 8
    RGBA8 = 9
    DXT1 = 10


# Dolphin's texture formats, these codes end up in the texture name
class TargetFormat(IntEnum):
    I4 = 0
    I8 = 1
    IA4 = 2
    IA8 = 3
    RGB565 = 4
    RGB5A3 = 5
    RGBA8 = 6
    C4 = 8
    C8 = 9
    C14X2 = 10
    CMPR = 14
    INVALID = -1


formats = {
SourceFormat.I4: TargetFormat.I4,
SourceFormat.I8: TargetFormat.I8,
SourceFormat.IA4: TargetFormat.IA4,
SourceFormat.IA8: TargetFormat.IA8,
SourceFormat.IDX4: TargetFormat.C4,
SourceFormat.IDX8: TargetFormat.C8,
SourceFormat.RGB565: TargetFormat.RGB565,
SourceFormat.RGB5A3: TargetFormat.RGB5A3,
SourceFormat.RGBA8: TargetFormat.RGBA8,
SourceFormat.DXT1: TargetFormat.CMPR
}

palettized = (SourceFormat.IDX4, SourceFormat.IDX8)

bpp = {
SourceFormat.I4: 4,
SourceFormat.DXT1: 4,
SourceFormat.I8: 8,
SourceFormat.IA4: 8,
SourceFormat.IA8: 16,
SourceFormat.RGB565: 16,
SourceFormat.RGB5A3: 16,
SourceFormat.RGBA8: 32
}


def source_format(fmt):
    """Return the SourceFormat for a raw header word, or None if it has no member."""
    try:
        return SourceFormat(fmt)
    except ValueError:
        return None


def map_format(fmt):
    source = source_format(fmt)
    if source is None:
        return TargetFormat.INVALID
    return formats.get(source, TargetFormat.INVALID)


def bits_per_pixel(fmt):
    if map_format(fmt) == TargetFormat.INVALID:
        raise UnsupportedFormat(fmt)
    source = SourceFormat(fmt)
    if source in palettized:
        raise PalettizedUnsupported(source)
    return bpp[source]


def compute_size(fmt, width, height):
    """Size in bytes of the base level, mip levels are not included."""
    bits = bits_per_pixel(fmt)
    pixels = width * height
    if bits == 4:
        # Rejected rather than dropping the trailing half byte
        if pixels % 2:
            raise OddDimensions(SourceFormat(fmt), width, height)
        return pixels // 2
    return pixels * bits // 8
