# coding: utf-8

'''
Unit tests for:
  immediate_stats/stat/stat.py
  immediate_stats/stat/container.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import math

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.base.numbers   import NumKind, I32_MAX

from .container import StatContainer
from .modifier  import Modifier, IModifier64
from .stat      import (Stat, stat_type,
                        IStat, IStat32, IStat64, FStat, FStat32, FStat64)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Stat(ZestBase):

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def test_new(self):
        stat = Stat(10)
        self.assertEqual(stat.base, 10)
        self.assertEqual(stat.bonus, 0)
        self.assertEqual(stat.multiplier, 1.0)

    def test_default(self):
        self.assertEqual(Stat(), Stat(0, 0, 1.0))

    def test_values_cast_to_kinds(self):
        stat = Stat(10.7, -2.2, 2)
        self.assertEqual(stat.base, 10)
        self.assertEqual(stat.bonus, -2)
        self.assertIsInstance(stat.multiplier, float)

        fstat = FStat32(3)
        self.assertIsInstance(fstat.base, float)

    def test_reset(self):
        for i in range(10):
            stat = Stat(i, 4, 1.5)
            stat.reset_modifiers()
            self.assertEqual(stat, Stat(i))

    def test_reset_idempotent(self):
        stat = Stat(7, 3, 2.0)
        stat.reset_modifiers()
        once = stat.copy()
        stat.reset_modifiers()
        self.assertEqual(stat, once)
        self.assertEqual(stat.base, 7)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def test_add(self):
        stat = Stat(10)
        stat += 5
        self.assertEqual(stat, Stat(10, 5, 1.0))

    def test_subtract(self):
        stat = Stat(10)
        stat -= 5
        self.assertEqual(stat, Stat(10, -5, 1.0))

    def test_multiply(self):
        stat = Stat(10)
        stat *= 2.0
        self.assertEqual(stat, Stat(10, 0, 2.0))

    def test_divide(self):
        stat = Stat(10)
        stat /= 2.0
        self.assertEqual(stat, Stat(10, 0, 0.5))

    def test_divide_by_zero(self):
        stat = Stat(10)
        stat /= 0.0
        self.assertEqual(stat.multiplier, math.inf)

        stat = Stat(10, 0, 0.0)
        stat /= 0
        self.assertTrue(math.isnan(stat.multiplier))

    def test_operators_return_same_stat(self):
        stat = Stat(1)
        original = stat
        stat += 1
        stat *= 2.0
        self.assertIs(stat, original)

    # -------------------------------------------------------------------------
    # Total
    # -------------------------------------------------------------------------

    def test_default_total(self):
        for i in range(10):
            self.assertEqual(Stat(i).total(), i)

    def test_total(self):
        self.assertEqual(Stat(10, 4, 1.5).total(), 21)

    def test_total_no_bonus(self):
        self.assertEqual(Stat(20).with_multiplier(0.5).total(), 10)

    def test_total_no_multiplier(self):
        self.assertEqual(Stat(2).with_bonus(1).total(), 3)

    def test_total_with_modifier(self):
        self.assertEqual(Stat(5).with_modifier(Modifier(1, 0.5)).total(), 3)

    def test_total_truncates(self):
        self.assertEqual(Stat(5, 0, 1.5).total(), 7)
        self.assertEqual(Stat(-5, 0, 1.5).total(), -7)

    def test_total_saturates(self):
        self.assertEqual(Stat(I32_MAX, 0, 2.0).total(), I32_MAX)

    def test_float_total(self):
        self.assertEqual(FStat64(2.5, 0.5, 2.0).total(), 6.0)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def test_builders_do_not_mutate(self):
        stat = Stat(10, 1, 2.0)
        copy = stat.copy()

        stat.with_bonus(5)
        stat.with_multiplier(3.0)
        stat.with_modifier(Modifier(4, 4.0))

        self.assertEqual(stat, copy)

    def test_with_modifier_overwrites(self):
        stat = Stat(10, 3, 2.0).with_modifier(Modifier(1, 0.5))
        self.assertEqual(stat, Stat(10, 1, 0.5))

    def test_copy_is_independent(self):
        stat = Stat(10)
        copy = stat.copy()
        copy += 3
        self.assertEqual(stat.bonus, 0)
        self.assertEqual(copy.bonus, 3)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def test_apply(self):
        stat = Stat(10)
        stat.apply(Modifier(2, 2.0))
        stat.apply(Modifier(3, 4.0))
        self.assertEqual(stat, Stat(10, 5, 8.0))

    def test_apply_scaled(self):
        stat = Stat(10)
        # +1, x1.5
        stat.apply_scaled(Modifier(2, 2.0), 0.5)
        # +2, x3.0
        stat.apply_scaled(Modifier(4, 5.0), 0.5)
        self.assertEqual(stat, Stat(10, 3, 4.5))

    def test_apply_scaled_full_weight_is_apply(self):
        scaled = Stat(10)
        scaled.apply_scaled(Modifier(2, 3.0), 1.0)
        applied = Stat(10)
        applied.apply(Modifier(2, 3.0))
        self.assertEqual(scaled, applied)

    def test_apply_scaled_zero_weight_is_noop(self):
        stat = Stat(10)
        stat.apply_scaled(Modifier(2, 3.0), 0.0)
        self.assertEqual(stat, Stat(10))

    # -------------------------------------------------------------------------
    # Scenario
    # -------------------------------------------------------------------------

    def test_speed_scenario(self):
        speed = Stat(10)
        speed *= 2.0
        speed += 5
        self.assertEqual(speed.total(), 30)

        speed.reset_modifiers()
        self.assertEqual(speed.total(), 10)

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def test_equality_checks_kinds(self):
        self.assertEqual(IStat32(1), Stat(1))
        self.assertNotEqual(IStat64(1), IStat32(1))
        self.assertNotEqual(FStat32(1), IStat32(1))
        self.assertNotEqual(Stat(1), 1)

    def test_not_hashable(self):
        with self.assertRaises(TypeError):
            hash(Stat(1))

    def test_repr(self):
        self.assertEqual(repr(Stat(10, 2, 1.5)),
                         "Stat(base=10, bonus=2, multiplier=1.5)")


class Test_StatKinds(ZestBase):

    def test_aliases(self):
        self.assertIs(IStat, IStat32)
        self.assertIs(FStat, FStat32)

        self.assertIs(IStat64.BASE_KIND, NumKind.I64)
        self.assertIs(IStat64.MULTIPLIER_KIND, NumKind.F64)
        self.assertIs(FStat32.BASE_KIND, NumKind.F32)
        self.assertIs(FStat64.MULTIPLIER_KIND, NumKind.F64)

    def test_stat_type_known(self):
        self.assertIs(stat_type(NumKind.I64, NumKind.F64), IStat64)
        self.assertIs(stat_type(NumKind.F32, NumKind.F32), FStat32)

    def test_stat_type_made_and_cached(self):
        made = stat_type(NumKind.I64, NumKind.F32)
        self.assertTrue(issubclass(made, Stat))
        self.assertIn('Stat', made.__name__)
        self.assertIs(made.BASE_KIND, NumKind.I64)
        self.assertIs(made.MULTIPLIER_KIND, NumKind.F32)
        self.assertIs(stat_type(NumKind.I64, NumKind.F32), made)

        stat = made(2 ** 40, 0, 0.5)
        self.assertEqual(stat.total(), 2 ** 39)

    def test_apply_other_kind_modifier(self):
        stat = IStat64(10)
        stat.apply(IModifier64(5, 2.0))
        self.assertEqual(stat.total(), 30)


class Test_StatContainer(ZestBase):

    def test_stat_is_container(self):
        self.assertIsInstance(Stat(1), StatContainer)
        self.assertTrue(issubclass(FStat64, StatContainer))

    def test_duck_typed_container(self):
        class HandWritten:
            def reset_modifiers(self):
                pass

        class NotOne:
            reset_modifiers = 3

        self.assertIsInstance(HandWritten(), StatContainer)
        self.assertFalse(issubclass(NotOne, StatContainer))
        self.assertFalse(issubclass(int, StatContainer))

    def test_cannot_instantiate(self):
        with self.assertRaises(TypeError):
            StatContainer()


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.stat.zest_stat

if __name__ == '__main__':
    import unittest
    unittest.main()
