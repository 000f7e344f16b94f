import sys

# Resolved once, every normalization compares against it
HOST_ORDER = sys.byteorder


def swap16(value):
    return ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)


def swap32(value):
    value = ((value & 0x0000FFFF) << 16) | ((value & 0xFFFF0000) >> 16)
    return ((value & 0x00FF00FF) << 8) | ((value & 0xFF00FF00) >> 8)


def to_host16(value, byteorder='little'):
    """Convert a u16 loaded in host order from a `byteorder` file."""
    if byteorder == HOST_ORDER:
        return value
    return swap16(value)


def to_host32(value, byteorder='little'):
    """Convert a u32 loaded in host order from a `byteorder` file."""
    if byteorder == HOST_ORDER:
        return value
    return swap32(value)
