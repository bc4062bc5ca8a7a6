# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/variant.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.stat           import Stat

from .variant import StatEnum, VariantDeclaration, variant, variants_of


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class EnumStat(StatEnum):
    Named = variant(stat=Stat, other=int)
    Unnamed = variant(Stat, int)
    Other = variant()


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Declaration(ZestBase):

    def test_named(self):
        declaration = variant(stat=Stat, other=int)
        self.assertIsInstance(declaration, VariantDeclaration)
        self.assertEqual(declaration.names, ('stat', 'other'))
        self.assertEqual(declaration.types, (Stat, int))

    def test_positional(self):
        declaration = variant(Stat, int)
        self.assertIsNone(declaration.names)
        self.assertEqual(declaration.types, (Stat, int))

    def test_unit(self):
        declaration = variant()
        self.assertIsNone(declaration.names)
        self.assertEqual(declaration.types, ())

    def test_mixed_is_error(self):
        with self.assertRaises(TypeError):
            variant(Stat, other=int)


class Test_StatEnum(ZestBase):

    def test_variants_are_subclasses(self):
        self.assertEqual(EnumStat.__variants__,
                         (EnumStat.Named, EnumStat.Unnamed, EnumStat.Other))
        for each in EnumStat.__variants__:
            self.assertTrue(issubclass(each, EnumStat))
        self.assertEqual(EnumStat.Named.__qualname__, 'EnumStat.Named')
        self.assertEqual(EnumStat.Named.__module__, __name__)

    def test_variants_of(self):
        found = variants_of(EnumStat)
        self.assertEqual([name for name, _, _ in found],
                         ['Named', 'Unnamed', 'Other'])
        name, declaration, target = found[0]
        self.assertEqual(declaration.names, ('stat', 'other'))
        self.assertIs(target, EnumStat.Named)

    def test_enum_not_instantiable(self):
        with self.assertRaises(TypeError):
            EnumStat()

    def test_named(self):
        value = EnumStat.Named(stat=Stat(1), other=0)
        self.assertIsInstance(value, EnumStat)
        self.assertIs(type(value), EnumStat.Named)
        self.assertEqual(value.stat, Stat(1))
        self.assertEqual(value.other, 0)

        value.other = 5
        self.assertEqual(value.other, 5)
        self.assertEqual(value[1], 5)
        self.assertEqual(len(value), 2)

    def test_named_positionally(self):
        self.assertEqual(EnumStat.Named(Stat(1), 0),
                         EnumStat.Named(stat=Stat(1), other=0))
        self.assertEqual(EnumStat.Named(Stat(1), other=0),
                         EnumStat.Named(stat=Stat(1), other=0))

    def test_positional(self):
        value = EnumStat.Unnamed(Stat(2), 3)
        self.assertEqual(value[0], Stat(2))
        self.assertEqual(list(value), [Stat(2), 3])

        value[1] = 4
        self.assertEqual(value[1], 4)

    def test_unit(self):
        value = EnumStat.Other()
        self.assertEqual(len(value), 0)
        self.assertEqual(value, EnumStat.Other())

    def test_in_place_stat_ops(self):
        value = EnumStat.Unnamed(Stat(2), 3)
        stat = value[0]
        stat += 1
        self.assertEqual(value[0].bonus, 1)

    def test_equality(self):
        self.assertNotEqual(EnumStat.Other(), EnumStat.Unnamed(Stat(1), 0))
        self.assertNotEqual(EnumStat.Unnamed(Stat(1), 0),
                            EnumStat.Unnamed(Stat(1), 1))
        self.assertNotEqual(EnumStat.Other(), None)

    def test_bad_args(self):
        with self.assertRaises(TypeError):
            EnumStat.Unnamed(Stat(1))
        with self.assertRaises(TypeError):
            EnumStat.Unnamed(Stat(1), other=1)
        with self.assertRaises(TypeError):
            EnumStat.Named(stat=Stat(1))
        with self.assertRaises(TypeError):
            EnumStat.Named(stat=Stat(1), other=0, extra=2)
        with self.assertRaises(TypeError):
            EnumStat.Named(Stat(1), stat=Stat(2), other=0)
        with self.assertRaises(TypeError):
            EnumStat.Other(1)

    def test_unknown_attribute(self):
        value = EnumStat.Named(stat=Stat(1), other=0)
        with self.assertRaises(AttributeError):
            value.nope

    def test_repr(self):
        self.assertEqual(repr(EnumStat.Unnamed(1, 2)),
                         'EnumStat.Unnamed(1, 2)')
        self.assertEqual(repr(EnumStat.Named(stat=1, other=2)),
                         'EnumStat.Named(stat=1, other=2)')
        self.assertEqual(repr(EnumStat.Other()), 'EnumStat.Other()')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_variant

if __name__ == '__main__':
    import unittest
    unittest.main()
