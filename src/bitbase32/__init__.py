"""
Key Ideas:
    (1) A byte sequence is the canonical binary form. May be an instance of bytes, bytearray, memoryview or a list of byte values.
    (2) Base32 text is a string over the RFC 3548 alphabet A-Z, 2-7 with "=" padding. Its length is a multiple of 8 whenever it is non-empty.
    (3) A group (or segment) is the unit of the bit-packing algorithm: 5 bytes on the binary side, 8 symbols on the text side. Both are 40 bits.
    (4) The bit accumulator holds bits carried across byte or symbol boundaries within one group. It is local to a single call.
    (5) Encoding always succeeds for bytes and produces uppercase text.
    (6) Decoding is case-insensitive and fails with InvalidCharacter when any character is neither a symbol nor padding.
    (7) Padding inside a group stops that group. A short final group is decoded as far as its bits allow.

API:
    text = encode(byte_sequence)
    byte_sequence = decode(text)
    result = try_decode(text) #DecodeResult instead of raising

    to_b32 / from_b32 are aliases of encode / decode.

>>> encode(b'foo')
'MZXW6==='
>>> decode(_)
b'foo'
"""
from .alphabet import ALPHABET, PADDING, InvalidCharacter, value_symbol, symbol_value, fold_case, validate
from .codec import SegmentSizeError, DecodeResult, encode, decode, try_decode, encode_segment, decode_segment, encoded_length

to_b32 = encode
from_b32 = decode

__version__ = '0.1.0'
