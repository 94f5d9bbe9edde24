import unittest
from bitbase32 import alphabet
from bitbase32.alphabet import InvalidCharacter, PADDING, SYMBOL_TO_VALUE, VALUE_TO_SYMBOL

class TestAlphabetTables(unittest.TestCase):
    def test_tables_are_inverse(self):
        self.assertEqual(len(VALUE_TO_SYMBOL),32)
        self.assertEqual(len(SYMBOL_TO_VALUE),32)
        for value,symbol in enumerate(VALUE_TO_SYMBOL):
            self.assertEqual(SYMBOL_TO_VALUE[symbol],value)

    def test_padding_not_in_reverse_table(self):
        self.assertNotIn(PADDING,SYMBOL_TO_VALUE)
        self.assertNotIn(PADDING,VALUE_TO_SYMBOL)

    def test_value_symbol_range(self):
        self.assertEqual(alphabet.value_symbol(0),'A')
        self.assertEqual(alphabet.value_symbol(25),'Z')
        self.assertEqual(alphabet.value_symbol(26),'2')
        self.assertEqual(alphabet.value_symbol(31),'7')
        with self.assertRaises(ValueError):
            alphabet.value_symbol(32)
        with self.assertRaises(ValueError):
            alphabet.value_symbol(-1)

class TestSymbolLookup(unittest.TestCase):
    def test_case_insensitive(self):
        for symbol in 'abcdefghijklmnopqrstuvwxyz':
            self.assertEqual(alphabet.symbol_value(symbol),alphabet.symbol_value(symbol.upper()))

    def test_padding_has_no_value(self):
        self.assertIsNone(alphabet.symbol_value('='))

    def test_unknown_characters_raise(self):
        for character in '0189!@ -+/\nı':
            with self.assertRaises(InvalidCharacter) as ctx:
                alphabet.symbol_value(character)
            self.assertEqual(ctx.exception.character,character)
            self.assertIsNone(ctx.exception.position)

    def test_fold_case_leaves_non_ascii(self):
        #'ß'.upper() is 'SS', which would look valid
        self.assertEqual(alphabet.fold_case('abß'),'ABß')
        self.assertEqual(alphabet.fold_case('ı'),'ı')

class TestValidate(unittest.TestCase):
    def test_returns_folded_text(self):
        self.assertEqual(alphabet.validate('mzxw6yq='),'MZXW6YQ=')
        self.assertEqual(alphabet.validate(''),'')

    def test_reports_first_offending_character(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            alphabet.validate('MZ1W!')
        self.assertEqual(ctx.exception.character,'1')
        self.assertEqual(ctx.exception.position,2)
        self.assertIn('position 2',str(ctx.exception))

    def test_invalid_character_is_value_error(self):
        with self.assertRaises(ValueError):
            alphabet.validate('ß')

if __name__ == '__main__':
    unittest.main()
