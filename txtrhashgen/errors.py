BANNER = 'Metroid Prime Dolphin Texture Hash Generator\nUsage: txtrhashgen <texture>'


class TextureHashError(Exception):
    """Base for every failure that ends a hash run."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class MissingArgument(TextureHashError):
    def __init__(self):
        super().__init__(BANNER)


class TextureNotFound(TextureHashError):
    def __init__(self, path):
        super().__init__(f'Unable to locate file {path}')
        self.path = path


class ShortRead(TextureHashError):
    def __init__(self, message, expected, actual):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class HeaderTruncated(ShortRead):
    def __init__(self, expected, actual):
        super().__init__(f'Truncated header: expected {expected} bytes, got {actual}', expected, actual)


class PayloadTruncated(ShortRead):
    def __init__(self, expected, actual):
        super().__init__(f'Truncated payload: expected {expected} bytes, got {actual}', expected, actual)


class UnsupportedFormat(TextureHashError):
    def __init__(self, fmt):
        super().__init__(f'Unsupported format {int(fmt)}')
        self.format = fmt


class PalettizedUnsupported(TextureHashError):
    def __init__(self, fmt=None):
        super().__init__('Palletized textures are currently unsupported')
        self.format = fmt


class OddDimensions(TextureHashError):
    def __init__(self, fmt, width, height):
        super().__init__(f'Odd pixel count {width}x{height} for 4 bpp format {fmt.name}')
        self.format = fmt
        self.width = width
        self.height = height


class UsageError(TextureHashError):
    pass
