# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/shape.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError

from .const import ShapeKind, STAT, STAT_IGNORE
from .shape import FieldShape, VariantShape, TypeShape


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Shapes(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_field_labels(self):
        named = FieldShape('health', 0, 'Stat')
        positional = FieldShape(None, 3, 'Stat')

        self.assertTrue(named.is_named)
        self.assertEqual(named.label, 'health')
        self.assertFalse(positional.is_named)
        self.assertEqual(positional.label, 3)

    def test_field_attributes(self):
        field = FieldShape('x', 0, 'int', [STAT, STAT_IGNORE])
        self.assertTrue(field.has(STAT))
        self.assertTrue(field.has(STAT_IGNORE))
        self.assertFalse(FieldShape('y', 1, 'int').has(STAT))

    def test_field_equality(self):
        self.assertEqual(FieldShape('x', 0, 'Stat', [STAT]),
                         FieldShape('x', 0, 'Stat', (STAT, )))
        self.assertNotEqual(FieldShape('x', 0, 'Stat'),
                            FieldShape('x', 1, 'Stat'))

    def test_variant_kinds(self):
        unit = VariantShape('Other')
        named = VariantShape('Named', [FieldShape('stat', 0, 'Stat')])
        positional = VariantShape('Unnamed', [FieldShape(None, 0, 'Stat')])

        self.assertTrue(unit.is_unit)
        self.assertFalse(unit.is_named)
        self.assertTrue(named.is_named)
        self.assertFalse(positional.is_named)
        self.assertFalse(positional.is_unit)

    def test_mixed_variant_fields(self):
        with self.assertRaises(DeriveError):
            VariantShape('Mixed', [FieldShape('stat', 0, 'Stat'),
                                   FieldShape(None, 1, 'int')])
        self.assert_logged(log.Level.ERROR, 'mixes named and positional')

    def test_mixed_type_fields(self):
        with self.assertRaises(DeriveError):
            TypeShape('Mixed', ShapeKind.STRUCT,
                      fields=[FieldShape(None, 0, 'Stat'),
                              FieldShape('b', 1, 'Stat')])

    def test_kind_must_match_fields(self):
        with self.assertRaises(DeriveError):
            TypeShape('Pair', ShapeKind.STRUCT,
                      fields=[FieldShape(None, 0, 'Stat')])
        with self.assertRaises(DeriveError):
            TypeShape('Hero', ShapeKind.TUPLE,
                      fields=[FieldShape('health', 0, 'Stat')])

    def test_union(self):
        shape = TypeShape('Raw', ShapeKind.UNION)
        self.assertIs(shape.kind, ShapeKind.UNION)
        self.assertEqual(shape.fields, ())
        self.assertEqual(shape.variants, ())


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_shape

if __name__ == '__main__':
    import unittest
    unittest.main()
