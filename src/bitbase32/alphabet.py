"""
This module holds the RFC 3548 Base32 alphabet as two static lookup tables:
    1. VALUE_TO_SYMBOL: 5-bit value (0-31) -> symbol character
    2. SYMBOL_TO_VALUE: symbol character -> 5-bit value

Both tables are built once at import and never modified afterwards.
SYMBOL_TO_VALUE only contains uppercase symbols. Lowercase input is folded before lookup.
The padding character is deliberately absent from SYMBOL_TO_VALUE.

>>> value_symbol(12)
'M'
>>> symbol_value('m')
12
>>> symbol_value('=') is None
True
>>> symbol_value('1')
Traceback (most recent call last):
    ...
bitbase32.alphabet.InvalidCharacter: invalid Base32 character '1'
"""
import string

ALPHABET = string.ascii_uppercase + '234567'
PADDING = '='

VALUE_TO_SYMBOL = tuple(ALPHABET)
SYMBOL_TO_VALUE = {symbol:value for value,symbol in enumerate(VALUE_TO_SYMBOL)}

#only ASCII letters are folded, anything else must fail the lookup unchanged
_FOLD_TABLE = str.maketrans(string.ascii_lowercase,string.ascii_uppercase)

class InvalidCharacter(ValueError):
    """
    Raised when text handed to the decoder contains a character that is neither one of the 32 symbols nor the padding character.
    """
    def __init__(self,character,position=None):
        self.character = character
        self.position = position
        if position is None:
            message = 'invalid Base32 character %s' % repr(character)
        else:
            message = 'invalid Base32 character %s at position %d' % (repr(character),position)
        super().__init__(message)

def value_symbol(value):
    """
    Returns the symbol for a 5-bit value.

    >>> ''.join(value_symbol(v) for v in (24,14,14))
    'YOO'
    """
    if not 0 <= value < len(VALUE_TO_SYMBOL):
        raise ValueError('5-bit value must be between 0 and 31 inclusive: %s' % repr(value))
    return VALUE_TO_SYMBOL[value]

def fold_case(text):
    """
    Folds ASCII lowercase letters to uppercase.

    >>> fold_case('mzxw6===')
    'MZXW6==='
    >>> fold_case('Straße')
    'STRAßE'
    """
    return text.translate(_FOLD_TABLE)

def symbol_value(symbol):
    """
    Returns the 5-bit value of a symbol (case-insensitive).
    The padding character has no value and gives None.
    Anything else raises InvalidCharacter.
    """
    symbol = fold_case(symbol)
    if symbol == PADDING:
        return None
    try:
        return SYMBOL_TO_VALUE[symbol]
    except KeyError:
        raise InvalidCharacter(symbol) from None

def validate(text):
    """
    Folds the case of text and checks that every character is a symbol or padding.
    Returns the folded text. The first offending character is reported along with its position.

    >>> validate('mzxw6===')
    'MZXW6==='
    >>> validate('A1!')
    Traceback (most recent call last):
        ...
    bitbase32.alphabet.InvalidCharacter: invalid Base32 character '1' at position 1
    """
    text = fold_case(text)
    for position,character in enumerate(text):
        if character not in SYMBOL_TO_VALUE and character != PADDING:
            raise InvalidCharacter(character,position)
    return text
