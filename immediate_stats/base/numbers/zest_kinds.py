# coding: utf-8

'''
Unit tests for:
  immediate_stats/base/numbers/kinds.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import math

from immediate_stats.zest.base.unit import ZestBase

from .const import I32_MIN, I32_MAX, I64_MIN, I64_MAX, F32_MAX
from .kinds import NumKind


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_NumKind_Identities(ZestBase):

    def test_integer_kinds(self):
        for kind in (NumKind.I32, NumKind.I64):
            self.assertTrue(kind.is_integer)
            self.assertEqual(kind.zero, 0)
            self.assertIsInstance(kind.zero, int)
            self.assertEqual(kind.one, 1)
            self.assertIsInstance(kind.one, int)

        self.assertEqual(NumKind.I32.minimum, I32_MIN)
        self.assertEqual(NumKind.I32.maximum, I32_MAX)
        self.assertEqual(NumKind.I64.minimum, I64_MIN)
        self.assertEqual(NumKind.I64.maximum, I64_MAX)

    def test_float_kinds(self):
        for kind in (NumKind.F32, NumKind.F64):
            self.assertFalse(kind.is_integer)
            self.assertIsInstance(kind.zero, float)
            self.assertIsInstance(kind.one, float)
            self.assertEqual(kind.one, 1.0)
            self.assertIsNone(kind.minimum)
            self.assertIsNone(kind.maximum)

    def test_str(self):
        self.assertEqual(str(NumKind.I32), 'i32')
        self.assertEqual(str(NumKind.F64), 'f64')
        self.assertEqual(repr(NumKind.F32), 'NumKind.F32')


class Test_NumKind_Cast(ZestBase):

    def test_int_truncates_toward_zero(self):
        self.assertEqual(NumKind.I32.cast(3.9), 3)
        self.assertEqual(NumKind.I32.cast(-3.9), -3)
        self.assertEqual(NumKind.I64.cast(0.99), 0)
        self.assertIsInstance(NumKind.I32.cast(3.9), int)

    def test_int_saturates(self):
        self.assertEqual(NumKind.I32.cast(2 ** 40), I32_MAX)
        self.assertEqual(NumKind.I32.cast(-(2 ** 40)), I32_MIN)
        self.assertEqual(NumKind.I32.cast(1e20), I32_MAX)
        self.assertEqual(NumKind.I64.cast(2 ** 70), I64_MAX)
        self.assertEqual(NumKind.I32.cast(math.inf), I32_MAX)
        self.assertEqual(NumKind.I32.cast(-math.inf), I32_MIN)

    def test_int_nan_is_zero(self):
        self.assertEqual(NumKind.I32.cast(math.nan), 0)
        self.assertEqual(NumKind.I64.cast(math.nan), 0)

    def test_f32_rounds(self):
        value = NumKind.F32.cast(0.1)
        self.assertNotEqual(value, 0.1)
        self.assertAlmostEqual(value, 0.1, places=7)
        # Exactly representable values survive.
        self.assertEqual(NumKind.F32.cast(1.5), 1.5)
        self.assertEqual(NumKind.F32.cast(3), 3.0)
        self.assertIsInstance(NumKind.F32.cast(3), float)

    def test_f32_overflow_is_inf(self):
        self.assertEqual(NumKind.F32.cast(F32_MAX), F32_MAX)
        self.assertEqual(NumKind.F32.cast(1e39), math.inf)
        self.assertEqual(NumKind.F32.cast(-1e39), -math.inf)
        self.assertTrue(math.isnan(NumKind.F32.cast(math.nan)))

    def test_f64(self):
        self.assertEqual(NumKind.F64.cast(0.1), 0.1)
        self.assertIsInstance(NumKind.F64.cast(2), float)


class Test_NumKind_Arithmetic(ZestBase):

    def test_add_sub_mul(self):
        self.assertEqual(NumKind.I32.add(I32_MAX, 1), I32_MAX)
        self.assertEqual(NumKind.I32.sub(I32_MIN, 1), I32_MIN)
        self.assertEqual(NumKind.I32.mul(3, 2.5), 7)
        self.assertEqual(NumKind.F32.mul(1.0, 2.0), 2.0)
        self.assertEqual(NumKind.F64.add(0.5, 0.25), 0.75)

    def test_int_div(self):
        self.assertEqual(NumKind.I32.div(7, 2), 3)
        self.assertEqual(NumKind.I32.div(-7, 2), -3)
        self.assertEqual(NumKind.I32.div(7, -2), -3)
        self.assertEqual(NumKind.I64.div(-8, -2), 4)

    def test_int_div_by_zero_raises(self):
        with self.assertRaises(ZeroDivisionError):
            NumKind.I32.div(1, 0)

    def test_float_div_by_zero(self):
        for kind in (NumKind.F32, NumKind.F64):
            self.assertEqual(kind.div(1.0, 0.0), math.inf)
            self.assertEqual(kind.div(-1.0, 0.0), -math.inf)
            self.assertEqual(kind.div(1.0, -0.0), -math.inf)
            self.assertTrue(math.isnan(kind.div(0.0, 0.0)))
            self.assertTrue(math.isnan(kind.div(math.nan, 0.0)))

    def test_float_div(self):
        self.assertEqual(NumKind.F32.div(1.0, 2.0), 0.5)
        self.assertEqual(NumKind.F64.div(1.0, 4), 0.25)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.base.numbers.zest_kinds

if __name__ == '__main__':
    import unittest
    unittest.main()
