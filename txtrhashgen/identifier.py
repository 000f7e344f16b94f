TEXTURE_PREFIX = 'tex1'


def format_identifier(width, height, has_mipmaps, digest, target):
    """Build a Dolphin custom texture name, e.g. tex1_64x64_m_0123456789abcdef_14."""
    mips = '_m' if has_mipmaps else ''
    return f'{TEXTURE_PREFIX}_{width}x{height}{mips}_{digest:016x}_{int(target)}'
