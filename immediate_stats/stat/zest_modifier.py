# coding: utf-8

'''
Unit tests for:
  immediate_stats/stat/modifier.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.base.numbers   import NumKind

from .modifier import (Modifier, modifier_type,
                       IModifier, IModifier32, IModifier64,
                       FModifier, FModifier32, FModifier64)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Modifier(ZestBase):

    def test_default(self):
        modifier = Modifier()
        self.assertEqual(modifier.bonus, 0)
        self.assertEqual(modifier.multiplier, 1.0)

    def test_add(self):
        modifier = Modifier()
        modifier += 5
        self.assertEqual(modifier, Modifier(5, 1.0))

    def test_subtract(self):
        modifier = Modifier()
        modifier -= 5
        self.assertEqual(modifier, Modifier(-5, 1.0))

    def test_multiply(self):
        modifier = Modifier()
        modifier *= 2.0
        self.assertEqual(modifier, Modifier(0, 2.0))

    def test_divide(self):
        modifier = Modifier()
        modifier /= 2.0
        self.assertEqual(modifier, Modifier(0, 0.5))

    def test_from_bonus_and_multiplier(self):
        self.assertEqual(Modifier.from_bonus(3), Modifier(3, 1.0))
        self.assertEqual(Modifier.from_multiplier(2.0), Modifier(0, 2.0))
        self.assertIsInstance(FModifier64.from_bonus(1), FModifier64)

    def test_scaled(self):
        scaled = Modifier(2, 2.0).scaled(0.5)
        self.assertEqual(scaled, Modifier(1, 1.5))

        scaled = Modifier(4, 5.0).scaled(0.5)
        self.assertEqual(scaled, Modifier(2, 3.0))

    def test_scaled_keeps_original(self):
        modifier = Modifier(4, 5.0)
        modifier.scaled(0.25)
        self.assertEqual(modifier, Modifier(4, 5.0))

    def test_copy(self):
        modifier = Modifier(1, 2.0)
        copy = modifier.copy()
        copy += 1
        self.assertEqual(modifier.bonus, 1)
        self.assertEqual(copy.bonus, 2)

    def test_repr(self):
        self.assertEqual(repr(Modifier(1, 0.5)),
                         "Modifier(bonus=1, multiplier=0.5)")


class Test_ModifierKinds(ZestBase):

    def test_aliases(self):
        self.assertIs(IModifier, IModifier32)
        self.assertIs(FModifier, FModifier32)
        self.assertIs(IModifier64.BASE_KIND, NumKind.I64)
        self.assertIs(FModifier32.BASE_KIND, NumKind.F32)

    def test_float_bonus(self):
        modifier = FModifier32(0.5)
        modifier += 0.25
        self.assertEqual(modifier.bonus, 0.75)

    def test_kinds_in_equality(self):
        self.assertNotEqual(IModifier64(1, 1.0), IModifier32(1, 1.0))
        self.assertEqual(IModifier32(1, 1.0), Modifier(1, 1.0))

    def test_modifier_type(self):
        self.assertIs(modifier_type(NumKind.F64, NumKind.F64), FModifier64)

        made = modifier_type(NumKind.I32, NumKind.F64)
        self.assertTrue(issubclass(made, Modifier))
        self.assertIs(made.MULTIPLIER_KIND, NumKind.F64)
        self.assertIs(modifier_type(NumKind.I32, NumKind.F64), made)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.stat.zest_modifier

if __name__ == '__main__':
    import unittest
    unittest.main()
