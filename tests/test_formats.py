import pytest

from txtrhashgen.errors import OddDimensions, PalettizedUnsupported, UnsupportedFormat
from txtrhashgen.formats import SourceFormat, TargetFormat, bits_per_pixel, compute_size, map_format


def test_ordinals_are_stable():
    assert [f.value for f in SourceFormat] == list(range(11))
    assert SourceFormat.RGB564 == 6
    assert SourceFormat.DXT1 == 10


def test_target_codes():
    assert TargetFormat.RGBA8 == 6
    assert TargetFormat.C4 == 8
    assert TargetFormat.C8 == 9
    assert TargetFormat.CMPR == 14
    assert TargetFormat.INVALID < 0


@pytest.mark.parametrize('source,target', [
    (SourceFormat.I4, 0),
    (SourceFormat.I8, 1),
    (SourceFormat.IA4, 2),
    (SourceFormat.IA8, 3),
    (SourceFormat.IDX4, 8),
    (SourceFormat.IDX8, 9),
    (SourceFormat.RGB565, 4),
    (SourceFormat.RGB5A3, 5),
    (SourceFormat.RGBA8, 6),
    (SourceFormat.DXT1, 14),
])
def test_map_format(source, target):
    assert map_format(source) == target
    assert map_format(int(source)) == target


@pytest.mark.parametrize('fmt', [SourceFormat.RGB564, 11, 12, 255, -1, -2147483648])
def test_map_format_invalid(fmt):
    assert map_format(fmt) == TargetFormat.INVALID


def test_map_format_is_injective():
    targets = [map_format(f) for f in SourceFormat if map_format(f) != TargetFormat.INVALID]
    assert len(targets) == 10
    assert len(set(targets)) == len(targets)


@pytest.mark.parametrize('fmt,size', [
    (SourceFormat.I4, 32),
    (SourceFormat.DXT1, 32),
    (SourceFormat.I8, 64),
    (SourceFormat.IA4, 64),
    (SourceFormat.IA8, 128),
    (SourceFormat.RGB565, 128),
    (SourceFormat.RGB5A3, 128),
    (SourceFormat.RGBA8, 256),
])
def test_compute_size(fmt, size):
    assert compute_size(fmt, 8, 8) == size


def test_compute_size_non_square():
    assert compute_size(SourceFormat.RGBA8, 4, 4) == 64
    assert compute_size(SourceFormat.DXT1, 16, 2) == 16
    assert compute_size(SourceFormat.I8, 3, 5) == 15


def test_compute_size_monotonic():
    sized = [f for f in SourceFormat if f not in (SourceFormat.IDX4, SourceFormat.IDX8, SourceFormat.RGB564)]
    for fmt in sized:
        for width in range(0, 10, 2):
            for height in range(0, 10, 2):
                size = compute_size(fmt, width, height)
                assert compute_size(fmt, width + 2, height) >= size
                assert compute_size(fmt, width, height + 2) >= size


def test_bits_per_pixel():
    assert bits_per_pixel(SourceFormat.I4) == 4
    assert bits_per_pixel(SourceFormat.IA4) == 8
    assert bits_per_pixel(SourceFormat.RGB5A3) == 16
    assert bits_per_pixel(SourceFormat.RGBA8) == 32


@pytest.mark.parametrize('fmt', [SourceFormat.IDX4, SourceFormat.IDX8])
def test_palettized_rejected(fmt):
    with pytest.raises(PalettizedUnsupported) as e:
        compute_size(fmt, 8, 8)
    assert str(e.value) == 'Palletized textures are currently unsupported'


@pytest.mark.parametrize('fmt', [SourceFormat.RGB564, 11, -1])
def test_unsupported_rejected(fmt):
    with pytest.raises(UnsupportedFormat) as e:
        compute_size(fmt, 8, 8)
    assert str(e.value) == f'Unsupported format {int(fmt)}'


@pytest.mark.parametrize('fmt', [SourceFormat.I4, SourceFormat.DXT1])
def test_odd_pixel_count_rejected(fmt):
    with pytest.raises(OddDimensions) as e:
        compute_size(fmt, 3, 3)
    assert e.value.width == 3
    assert e.value.height == 3
    assert fmt.name in str(e.value)
