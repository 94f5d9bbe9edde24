"""
This module provides the small pieces of bit arithmetic shared by the encoder and decoder:
    1. Masks applied to the bit accumulator
    2. Group counting for the 5-byte / 8-symbol block structure of Base32

"""
from math import ceil

BITS_PER_BYTE = 8
BITS_PER_SYMBOL = 5
BYTES_PER_GROUP = 5 #40 bits of binary data
SYMBOLS_PER_GROUP = 8 #40 bits of encoded data

def ones_block(length,lshift=0):
    """
    Returns an unsigned integer with length consecutive 1 bits, shifted left by lshift.

    >>> bin(ones_block(5))
    '0b11111'
    >>> bin(ones_block(3,2))
    '0b11100'
    """
    return ((1<<length)-1)<<lshift

def rmask(num_mask_bits,value):
    """
    This function keeps only the num_mask_bits LSBs of an unsigned integer.
    It is used to drop bits from the accumulator once they have been emitted.

    >>> rmask(3,0xff)
    7
    >>> rmask(0,0xff)
    0
    """
    return ones_block(num_mask_bits) & value

def num_groups(num_units,group_size):
    """
    Number of groups needed to hold num_units items when the final group is allowed to be partial.

    >>> num_groups(0,5)
    0
    >>> num_groups(5,5)
    1
    >>> num_groups(6,5)
    2
    """
    if num_units < 0:
        raise ValueError('number of units must be non-negative: %d' % num_units)
    return int(ceil(num_units/group_size))

def iter_groups(sequence,group_size):
    """
    Yields consecutive slices of group_size items. The last slice may be shorter.

    >>> list(iter_groups(b'foobar',5))
    [b'fooba', b'r']
    >>> list(iter_groups('',8))
    []
    """
    for start in range(0,len(sequence),group_size):
        yield sequence[start:start+group_size]

def symbols_for_bytes(num_bytes):
    """
    Number of meaningful (non-padding) symbols produced when encoding num_bytes bytes within a single group.

    >>> [symbols_for_bytes(n) for n in range(6)]
    [0, 2, 4, 5, 7, 8]
    """
    return int(ceil(num_bytes*BITS_PER_BYTE/BITS_PER_SYMBOL))

def bytes_for_symbols(num_symbols):
    """
    Number of whole bytes that can be assembled from num_symbols symbols within a single group.
    Any leftover bits do not make up a byte and are discarded.

    >>> [bytes_for_symbols(n) for n in range(9)]
    [0, 0, 1, 1, 2, 3, 3, 4, 5]
    """
    return (num_symbols*BITS_PER_SYMBOL)//BITS_PER_BYTE
