"""
Encoding Tests

left_encode / right_encode / encode_string / bytepad must be byte-exact:
any deviation silently breaks interoperability with other SP 800-185
implementations.
"""

import pytest

from parallelhash.encoding import (
    left_encode, right_encode, encode_string, byte_pad,
    decode_left, decode_right,
)
from parallelhash.types import InvalidLength, InvalidParameter


# =============================================================================
# INTEGER ENCODINGS
# =============================================================================

class TestLeftEncode:

    def test_zero(self):
        assert left_encode(0) == b'\x01\x00'

    @pytest.mark.parametrize("value,expected", [
        (1, b'\x01\x01'),
        (255, b'\x01\xff'),
        (256, b'\x02\x01\x00'),
        (65535, b'\x02\xff\xff'),
        (65536, b'\x03\x01\x00\x00'),
        (168, b'\x01\xa8'),
        (136, b'\x01\x88'),
    ])
    def test_known_values(self, value, expected):
        assert left_encode(value) == expected

    @pytest.mark.parametrize("value", [0, 1, 255, 256, 65535, 65536, 2**64 - 1, 2**64, 10**100])
    def test_minimal_length(self, value):
        enc = left_encode(value)
        n = enc[0]
        assert len(enc) == n + 1
        assert value < 256 ** n
        if n > 1:
            assert value >= 256 ** (n - 1)

    def test_largest_encodable(self):
        value = 256 ** 255 - 1
        enc = left_encode(value)
        assert enc[0] == 255
        assert len(enc) == 256

    def test_too_large_rejected(self):
        with pytest.raises(InvalidLength):
            left_encode(256 ** 255)

    def test_negative_rejected(self):
        with pytest.raises(InvalidParameter):
            left_encode(-1)

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidParameter):
            left_encode(value)


class TestRightEncode:

    def test_zero(self):
        assert right_encode(0) == b'\x00\x01'

    @pytest.mark.parametrize("value,expected", [
        (1, b'\x01\x01'),
        (255, b'\xff\x01'),
        (256, b'\x01\x00\x02'),
        (65535, b'\xff\xff\x02'),
        (65536, b'\x01\x00\x00\x03'),
    ])
    def test_known_values(self, value, expected):
        assert right_encode(value) == expected

    def test_mirror_of_left_encode(self):
        for value in [0, 7, 300, 2**40]:
            left = left_encode(value)
            right = right_encode(value)
            assert right == left[1:] + left[:1]

    def test_too_large_rejected(self):
        with pytest.raises(InvalidLength):
            right_encode(256 ** 255)

    def test_negative_rejected(self):
        with pytest.raises(InvalidParameter):
            right_encode(-5)


# =============================================================================
# ROUND TRIP
# =============================================================================

class TestRoundTrip:

    @pytest.mark.parametrize("value", [0, 1, 255, 256, 65535, 65536, 2**32, 2**255, 256 ** 255 - 1])
    def test_left(self, value):
        decoded, rest = decode_left(left_encode(value) + b'tail')
        assert decoded == value
        assert rest == b'tail'

    @pytest.mark.parametrize("value", [0, 1, 255, 256, 65535, 65536, 2**32, 2**255, 256 ** 255 - 1])
    def test_right(self, value):
        decoded, head = decode_right(b'head' + right_encode(value))
        assert decoded == value
        assert head == b'head'

    @pytest.mark.parametrize("data", [b'', b'\x01', b'\x02\x01', b'\x00\x00'])
    def test_truncated_left(self, data):
        with pytest.raises(InvalidLength):
            decode_left(data)

    @pytest.mark.parametrize("data", [b'', b'\x01', b'\x01\x02', b'\x00\x00'])
    def test_truncated_right(self, data):
        with pytest.raises(InvalidLength):
            decode_right(data)


# =============================================================================
# STRINGS AND PADDING
# =============================================================================

class TestEncodeString:

    def test_empty(self):
        assert encode_string(b'') == b'\x01\x00'

    def test_bit_length_prefix(self):
        # 4 bytes = 32 bits
        assert encode_string(b'test') == b'\x01\x20test'

    def test_function_name(self):
        # 12 bytes = 96 bits
        assert encode_string(b'ParallelHash') == b'\x01\x60ParallelHash'

    def test_long_string_uses_two_length_bytes(self):
        s = b'x' * 32  # 256 bits
        assert encode_string(s) == b'\x02\x01\x00' + s

    def test_accepts_bytearray(self):
        assert encode_string(bytearray(b'ab')) == b'\x01\x10ab'

    @pytest.mark.parametrize("value", [3, 'abc', None, [1, 2]])
    def test_rejects_non_bytes(self, value):
        with pytest.raises(InvalidParameter):
            encode_string(value)


class TestBytePad:

    def test_empty_rate_168(self):
        padded = byte_pad(b'', 168)
        assert len(padded) == 168
        assert padded[:2] == b'\x01\xa8'
        assert padded[2:] == b'\x00' * 166

    def test_cshake_prefix_layout(self):
        # bytepad(encode_string("") || encode_string("Email Signature"), 168)
        x = encode_string(b'') + encode_string(b'Email Signature')
        padded = byte_pad(x, 168)
        assert padded.startswith(b'\x01\xa8\x01\x00\x01\x78Email Signature')
        assert len(padded) == 168

    def test_exact_fit_not_extended(self):
        # left_encode(8) is two bytes, so six bytes of X fill one block
        assert byte_pad(b'abcdef', 8) == b'\x01\x08abcdef'

    def test_overflow_to_second_block(self):
        padded = byte_pad(b'abcdefg', 8)
        assert len(padded) == 16
        assert padded == b'\x01\x08abcdefg' + b'\x00' * 7

    @pytest.mark.parametrize("w", [1, 2, 3, 136, 168, 1000])
    @pytest.mark.parametrize("size", [0, 1, 135, 136, 167, 168, 500])
    def test_multiple_of_width(self, w, size):
        x = bytes(size)
        padded = byte_pad(x, w)
        assert len(padded) % w == 0
        assert len(padded) >= len(left_encode(w)) + len(x)
        assert len(padded) - w < len(left_encode(w)) + len(x)

    @pytest.mark.parametrize("w", [0, -1, 1.5, None])
    def test_invalid_width(self, w):
        with pytest.raises(InvalidParameter):
            byte_pad(b'x', w)

    @pytest.mark.parametrize("value", [2, 'x', None])
    def test_rejects_non_bytes(self, value):
        with pytest.raises(InvalidParameter):
            byte_pad(value, 4)
