import io
import struct


def make_header(fmt, width, height, mipmap_count=1, byteorder='little'):
    prefix = '<' if byteorder == 'little' else '>'
    return struct.pack(prefix + 'iHHI', fmt, width, height, mipmap_count)


def write_texture(path, fmt, width, height, payload, mipmap_count=1, byteorder='little'):
    path.write_bytes(make_header(fmt, width, height, mipmap_count, byteorder) + payload)
    return path


class RecordingStream(io.BytesIO):
    """BytesIO that remembers the size of every read."""

    def __init__(self, data):
        super().__init__(data)
        self.reads = []

    def read(self, size=-1):
        self.reads.append(size)
        return super().read(size)
