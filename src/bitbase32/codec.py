"""
This module converts between bytes and RFC 3548 Base32 text.

Encoding works on groups of 5 bytes (40 bits). Each group is read 5 bits at a time, MSB first, and produces 8 symbols.
A final partial group produces only as many symbols as its bits need and is then padded with "=" out to 8 characters.

Decoding works on groups of 8 symbols. Each group is reassembled 5 bits at a time and a byte is emitted every time 8 bits are available.
A group stops at its first padding character, and a group shorter than 8 symbols is accepted as is.
Bits that do not make up a whole byte are dropped.

>>> encode(b'fooba')
'MZXW6YTB'
>>> encode(b'foob')
'MZXW6YQ='
>>> decode('mzxw6yq=')
b'foob'
>>> decode('MZXW6Y')
b'foo'
"""
from dataclasses import dataclass
from typing import Optional
import logarhythm
from .alphabet import PADDING, InvalidCharacter, value_symbol, symbol_value, validate
from .bit_utils import BITS_PER_BYTE, BITS_PER_SYMBOL, BYTES_PER_GROUP, SYMBOLS_PER_GROUP, rmask, num_groups, iter_groups, symbols_for_bytes

logger = logarhythm.getLogger('codec')
logger.format = logarhythm.build_format(time=None,level=False)

class SegmentSizeError(Exception):pass

def _as_bytes(data):
    if isinstance(data,(bytes,bytearray,memoryview)):
        return bytes(data)
    if data is None or isinstance(data,(int,str)):
        #bytes(n) would silently produce n zero bytes, text needs an explicit encoding
        raise TypeError('data to encode must be bytes-like, not %s' % repr(type(data)))
    return bytes(data)

def _as_text(text):
    if isinstance(text,(bytes,bytearray,memoryview)):
        #every byte maps to one character so non-ASCII bytes are reported, not mangled
        return bytes(text).decode('latin-1')
    if not isinstance(text,str):
        raise TypeError('text to decode must be str or bytes-like, not %s' % repr(type(text)))
    return text

def encoded_length(num_bytes):
    """
    Length of the Base32 text for num_bytes bytes of input.

    >>> [encoded_length(n) for n in (0,1,5,6,10)]
    [0, 8, 8, 16, 16]
    """
    return num_groups(num_bytes,BYTES_PER_GROUP)*SYMBOLS_PER_GROUP

def encode_segment(segment):
    """
    Encodes a single group of at most 5 bytes into 8 characters.

    >>> encode_segment(b'f')
    'MY======'
    >>> encode_segment(b'')
    ''
    """
    segment = _as_bytes(segment)
    if len(segment) > BYTES_PER_GROUP:
        raise SegmentSizeError('Segment must be %d bytes or fewer: length = %d' % (BYTES_PER_GROUP,len(segment)))
    if len(segment) == 0:
        return ''

    symbols = []
    accumulator = 0
    num_bits = 0 #bits in the accumulator not yet emitted
    for value in segment:
        accumulator = (accumulator << BITS_PER_BYTE) | value
        num_bits += BITS_PER_BYTE
        while num_bits >= BITS_PER_SYMBOL:
            num_bits -= BITS_PER_SYMBOL
            symbols.append(value_symbol(accumulator >> num_bits))
            accumulator = rmask(num_bits,accumulator)
    if num_bits > 0:
        #leftover bits become the MSBs of a final zero-filled symbol
        symbols.append(value_symbol(accumulator << (BITS_PER_SYMBOL-num_bits)))

    return ''.join(symbols).ljust(SYMBOLS_PER_GROUP,PADDING)

def encode(data):
    """
    Encodes bytes into uppercase, "="-padded Base32 text.
    Lists of byte values are accepted as well. Strings are rejected, encode them to bytes first.

    >>> encode(b'')
    ''
    >>> encode([0x66,0x6f])
    'MZXQ===='
    """
    bytes_data = _as_bytes(data)
    logger.debug('encode: %d bytes in %d groups' % (len(bytes_data),num_groups(len(bytes_data),BYTES_PER_GROUP)))
    partial = len(bytes_data) % BYTES_PER_GROUP
    if partial:
        logger.debug('encode: final group has %d bytes -> %d symbols' % (partial,symbols_for_bytes(partial)))
    return ''.join(encode_segment(segment) for segment in iter_groups(bytes_data,BYTES_PER_GROUP))

def _decode_group(group):
    """
    Returns the bytes assembled from group and whether a padding character stopped it early.
    """
    result = bytearray()
    accumulator = 0
    num_bits = 0 #bits in the accumulator not yet emitted
    for symbol in group:
        value = symbol_value(symbol)
        if value is None:
            return bytes(result),True
        accumulator = (accumulator << BITS_PER_SYMBOL) | value
        num_bits += BITS_PER_SYMBOL
        if num_bits >= BITS_PER_BYTE:
            num_bits -= BITS_PER_BYTE
            result.append(accumulator >> num_bits)
            accumulator = rmask(num_bits,accumulator)
    return bytes(result),False

def decode_segment(segment):
    """
    Decodes a single group of at most 8 characters.

    >>> decode_segment('MZXQ====')
    b'fo'
    >>> decode_segment('MZXW6YTB')
    b'fooba'
    """
    segment = _as_text(segment)
    if len(segment) > SYMBOLS_PER_GROUP:
        raise SegmentSizeError('Segment must be %d characters or fewer: length = %d' % (SYMBOLS_PER_GROUP,len(segment)))
    return _decode_group(validate(segment))[0]

def decode(text):
    """
    Decodes Base32 text into bytes. The text is case-insensitive.
    Raises InvalidCharacter if any character is outside the alphabet and is not padding.

    >>> decode('')
    b''
    >>> decode('MY======MZXQ====')
    b'ffo'
    """
    text = _as_text(text)
    try:
        text = validate(text)
    except InvalidCharacter as e:
        logger.debug('decode: rejected input of %d characters: %s' % (len(text),str(e)))
        raise
    logger.debug('decode: %d characters in %d groups' % (len(text),num_groups(len(text),SYMBOLS_PER_GROUP)))
    partial = len(text) % SYMBOLS_PER_GROUP
    if partial:
        logger.debug('decode: final group is short, %d of %d symbols' % (partial,SYMBOLS_PER_GROUP))

    chunks = []
    num_stopped = 0
    for group in iter_groups(text,SYMBOLS_PER_GROUP):
        chunk,stopped = _decode_group(group)
        chunks.append(chunk)
        num_stopped += stopped
    if num_stopped:
        logger.debug('decode: %d groups stopped at padding' % num_stopped)
    return b''.join(chunks)

@dataclass
class DecodeResult:
    """
    Outcome of try_decode().

    On success: success=True, data holds the decoded bytes, error is None.
    On failure: success=False, data is None, error is the InvalidCharacter that was raised.
    """
    success: bool
    data: Optional[bytes] = None
    error: Optional[InvalidCharacter] = None

    def summary(self):
        if self.success:
            return '[OK] %d bytes decoded' % len(self.data)
        return '[FAIL] %s' % str(self.error)

def try_decode(text):
    """
    Same as decode() but returns a DecodeResult instead of raising InvalidCharacter.

    >>> try_decode('MZXW6===').summary()
    '[OK] 3 bytes decoded'
    >>> try_decode('A1!').summary()
    "[FAIL] invalid Base32 character '1' at position 1"
    """
    try:
        data = decode(text)
    except InvalidCharacter as e:
        return DecodeResult(success=False,error=e)
    return DecodeResult(success=True,data=data)
