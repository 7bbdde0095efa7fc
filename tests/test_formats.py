"""
Tests for the tileset format decoders
"""
import struct

import numpy as np
import pytest

from tileset_assets.formats import (
    BlockTable,
    Cv5Parser,
    Vx4Parser,
    Vf4Parser,
    Vr4Parser,
    WpeParser,
    Vf4Entry,
    Vf4Flags,
    Vx4Entry,
    PixelBlock,
    DecodeError,
    TruncatedInputError,
    TrailingDataError,
    PartialRecordError,
    OutOfRangeError,
    decode_cv5,
    decode_vx4,
    decode_vf4,
    decode_vr4,
    decode_wpe,
)
from tileset_assets.formats.wpe import srgb

from builders import cv5_group, u16_block, vr4_block, vx4_entry, wpe_palette

DECODERS = [
    (decode_cv5, 52),
    (decode_vx4, 32),
    (decode_vf4, 32),
    (decode_vr4, 64),
    (decode_wpe, 4),
]


class TestRecordSizes:
    """Whole-buffer rules shared by every format"""

    @pytest.mark.parametrize('parser_class,size', [
        (Cv5Parser, 52),
        (Vx4Parser, 32),
        (Vf4Parser, 32),
        (Vr4Parser, 64),
        (WpeParser, 4),
    ])
    def test_record_size(self, parser_class, size):
        assert parser_class.record_size() == size

    @pytest.mark.parametrize('decode,size', DECODERS)
    @pytest.mark.parametrize('count', [0, 1, 3])
    def test_exact_multiple_decodes(self, decode, size, count):
        table = decode(b'\x00' * (size * count))
        assert len(table) == count

    @pytest.mark.parametrize('decode,size', DECODERS)
    def test_one_byte_short_is_truncated(self, decode, size):
        with pytest.raises(TruncatedInputError) as excinfo:
            decode(b'\x00' * (size * 2 - 1))
        assert excinfo.value.offset == size

    @pytest.mark.parametrize('decode,size', DECODERS)
    @pytest.mark.parametrize('extra', [1, 2])
    def test_trailing_bytes_rejected(self, decode, size, extra):
        with pytest.raises(TrailingDataError) as excinfo:
            decode(b'\x00' * (size * 2 + extra))
        assert excinfo.value.offset == size * 2

    def test_partial_record_is_both_kinds(self):
        with pytest.raises(PartialRecordError) as excinfo:
            decode_wpe(b'\x01\x02\x03')
        error = excinfo.value
        assert isinstance(error, TruncatedInputError)
        assert isinstance(error, TrailingDataError)
        assert isinstance(error, DecodeError)
        assert error.format_name == 'WPE'
        assert 'offset 0' in str(error)

    def test_expected_count_short(self):
        with pytest.raises(TruncatedInputError) as excinfo:
            decode_vx4(b'\x00' * 32, expected_count=2)
        assert not isinstance(excinfo.value, TrailingDataError)
        assert excinfo.value.offset == 32

    def test_expected_count_long(self):
        with pytest.raises(TrailingDataError) as excinfo:
            decode_vx4(b'\x00' * 96, expected_count=2)
        assert not isinstance(excinfo.value, TruncatedInputError)
        assert excinfo.value.offset == 64

    def test_expected_count_exact(self):
        assert len(decode_vx4(b'\x00' * 64, expected_count=2)) == 2


class TestBlockTable:
    """Test the immutable table type"""

    def test_get_in_range(self):
        table = BlockTable('TEST', ['a', 'b'])
        assert table.get(1) == 'b'
        assert list(table) == ['a', 'b']

    @pytest.mark.parametrize('index', [-1, 2, 100])
    def test_get_out_of_range(self, index):
        table = BlockTable('TEST', ['a', 'b'])
        with pytest.raises(OutOfRangeError) as excinfo:
            table.get(index)
        assert excinfo.value.table == 'TEST'
        assert excinfo.value.index == index
        assert excinfo.value.length == 2

    def test_immutable(self):
        table = BlockTable('TEST', ['a'])
        with pytest.raises(AttributeError):
            table._blocks = ()

    def test_par_map_preserves_order(self):
        table = BlockTable('TEST', list(range(20)))
        assert table.par_map(lambda x: x * 2, max_workers=4) == [x * 2 for x in range(20)]


class TestWpe:
    """Test palette decoding"""

    def test_padding_discarded(self):
        table = decode_wpe(wpe_palette([(1, 2, 3), (250, 251, 252)], pad=0xFF))
        assert table.get(0).rgb() == (1, 2, 3)
        assert table.get(1).rgb() == (250, 251, 252)

    def test_standard_count(self):
        data = wpe_palette([(i, i, i) for i in range(256)])
        table = decode_wpe(data, expected_count=WpeParser.STANDARD_COUNT)
        assert len(table) == 256

    def test_as_array(self):
        table = decode_wpe(wpe_palette([(1, 2, 3), (4, 5, 6)]))
        array = table.as_array()
        assert array.shape == (2, 3)
        assert array.dtype == np.uint8
        assert array[1].tolist() == [4, 5, 6]
        assert not array.flags.writeable

    def test_srgb_raw_magnitude(self):
        assert srgb(255) == pytest.approx(255 ** (1 / 2.2))
        assert srgb(255) == pytest.approx(12.41, abs=0.01)
        assert srgb(0) == 0.0
        assert srgb(1) == 1.0

    def test_color_srgb(self):
        color = decode_wpe(wpe_palette([(255, 0, 1)])).get(0)
        r, g, b = color.srgb()
        assert r == pytest.approx(255 ** (1 / 2.2))
        assert g == 0.0
        assert b == 1.0


class TestVr4:
    """Test minitile pixel block decoding"""

    def test_block_contents(self):
        table = decode_vr4(vr4_block(range(64)) + vr4_block([9] * 64))
        block = table.get(0)
        assert isinstance(block, PixelBlock)
        assert block.pixel(0, 0) == 0
        assert block.pixel(7, 0) == 7
        assert block.pixel(0, 1) == 8
        assert block.pixel(7, 7) == 63
        assert table.get(1).indices == bytes([9] * 64)

    def test_mirrored(self):
        block = decode_vr4(vr4_block(range(64))).get(0)
        mirrored = block.mirrored()
        for y in range(8):
            for x in range(8):
                assert mirrored.pixel(x, y) == block.pixel(7 - x, y)
        assert mirrored.mirrored() == block

    def test_rows_and_array(self):
        block = decode_vr4(vr4_block(range(64))).get(0)
        assert block.rows()[1] == tuple(range(8, 16))
        array = block.as_array()
        assert array.shape == (8, 8)
        assert array[2, 3] == block.pixel(3, 2)
        assert not array.flags.writeable

    def test_pixel_out_of_bounds(self):
        block = PixelBlock(bytes(64))
        with pytest.raises(ValueError):
            block.pixel(8, 0)

    def test_wrong_size_block(self):
        with pytest.raises(ValueError):
            PixelBlock(bytes(63))


class TestVf4:
    """Test minitile flag decoding"""

    def test_block_entries(self):
        values = list(range(16))
        table = decode_vf4(u16_block(values))
        block = table.get(0)
        assert len(block) == 16
        assert [entry.value for entry in block] == values

    def test_little_endian(self):
        table = decode_vf4(struct.pack('<16H', *([0x0102] * 16)))
        assert table.get(0)[0].value == 0x0102

    def test_walkable_only(self):
        entry = Vf4Entry(0x0001)
        assert entry.is_walkable()
        assert not entry.is_elevation_mid()
        assert not entry.is_elevation_high()
        assert not entry.is_elevation_low()
        assert not entry.blocks_view()
        assert not entry.is_ramp()

    def test_low_overlaps_mid_and_high(self):
        entry = Vf4Entry(0x0006)
        assert entry.is_elevation_low()
        assert entry.is_elevation_mid()
        assert entry.is_elevation_high()
        assert not entry.is_walkable()

    @pytest.mark.parametrize('value', [0x0002, 0x0004])
    def test_single_elevation_bit_is_not_low(self, value):
        assert not Vf4Entry(value).is_elevation_low()

    def test_view_and_ramp(self):
        entry = Vf4Entry(0x0018)
        assert entry.blocks_view()
        assert entry.is_ramp()
        assert entry.flags() == Vf4Flags.BLOCKS_VIEW | Vf4Flags.RAMP

    def test_to_dict(self):
        flags = Vf4Entry(0x0009).to_dict()
        assert flags['raw_value'] == 9
        assert flags['walkable']
        assert flags['blocks_view']
        assert not flags['ramp']


class TestVx4:
    """Test minitile image reference decoding"""

    def test_entry_bits(self):
        table = decode_vx4(u16_block([vx4_entry(300, True), vx4_entry(5)] + [0] * 14))
        block = table.get(0)
        assert block[0].is_horizontally_flipped()
        assert block[0].pixel_block_index() == 300
        assert not block[1].is_horizontally_flipped()
        assert block[1].pixel_block_index() == 5

    def test_max_index(self):
        entry = Vx4Entry(0xFFFF)
        assert entry.is_horizontally_flipped()
        assert entry.pixel_block_index() == 0x7FFF


class TestCv5:
    """Test megatile reference decoding"""

    def test_header_skipped_and_kept(self):
        header = bytes(range(20))
        data = cv5_group(list(range(16)), header) + cv5_group([7] * 16)
        table = decode_cv5(data)
        assert len(table) == 2
        group = table.get(0)
        assert group.header == header
        assert group.references == tuple(range(16))
        assert group.reference(15) == 15
        assert table.get(1).references == (7,) * 16

    def test_large_reference(self):
        table = decode_cv5(cv5_group([0xFFFF] + [0] * 15))
        assert table.get(0).reference(0) == 0xFFFF

    def test_trailing_after_group(self):
        with pytest.raises(TrailingDataError):
            decode_cv5(cv5_group([0] * 16) + b'\x00' * 20)

    def test_to_dict(self):
        group = decode_cv5(cv5_group([1] * 16)).get(0)
        assert group.to_dict() == {'header': '00' * 20, 'references': [1] * 16}
