import unittest

from dataclasses import FrozenInstanceError

from twconfig.objects import CfgFlags, ConfigEntry, IntType, Sentinel, StrType, map_with_names


class TestCfgFlags(unittest.TestCase):
    def test_combination(self):
        a, b, c = CfgFlags.SAVE, CfgFlags.GAME, CfgFlags.COLALPHA

        self.assertEqual(a | b, b | a)
        self.assertEqual(a | a, a)
        self.assertEqual((a | b) | c, a | (b | c))

    def test_membership(self):
        flags = CfgFlags.CLIENT | CfgFlags.SAVE

        self.assertIn(CfgFlags.CLIENT, flags)
        self.assertNotIn(CfgFlags.SERVER, flags)

    def test_bits(self):
        self.assertEqual(len(CfgFlags), 10)
        self.assertEqual(int(CfgFlags.SAVE), 1)
        self.assertEqual(int(CfgFlags.COLLIGHT), 1 << 9)

    def test_order(self):
        flags = [CfgFlags.SERVER | CfgFlags.SAVE, CfgFlags.CLIENT, CfgFlags.SAVE]
        self.assertEqual(sorted(flags), [CfgFlags.SAVE, CfgFlags.CLIENT, CfgFlags.SERVER | CfgFlags.SAVE])


class TestEntries(unittest.TestCase):
    def test_frozen(self):
        entry = ConfigEntry('desc', StrType(4, 'abc'), CfgFlags.SAVE, 'name', 'Symbol')

        with self.assertRaises(FrozenInstanceError):
            entry.name = 'other'

    def test_slots(self):
        entry = ConfigEntry('desc', StrType(4, 'abc'), CfgFlags.SAVE, 'name', 'Symbol')

        self.assertFalse(hasattr(entry, '__dict__'))
        self.assertIn('symbol', ConfigEntry.__slots__)
        self.assertEqual(hash(entry), hash(ConfigEntry('desc', StrType(4, 'abc'), CfgFlags.SAVE, 'name', 'Symbol')))

    def test_is_literal(self):
        self.assertTrue(IntType(max=10, min=0, default=5).is_literal)
        self.assertFalse(IntType(max=Sentinel.MAX_CLIENTS, min=0, default=5).is_literal)

    def test_map_with_names(self):
        first = ConfigEntry('first', StrType(4, ''), CfgFlags.SAVE, 'name', 'A')
        second = ConfigEntry('second', StrType(4, ''), CfgFlags.SAVE, 'name', 'B')

        self.assertEqual(map_with_names([first, second]), {'name': second})
        self.assertEqual(map_with_names([]), {})


if __name__ == '__main__':
    unittest.main()
