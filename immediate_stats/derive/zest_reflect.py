# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/reflect.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Annotated, NamedTuple, ClassVar, Optional

import ctypes
import dataclasses
import enum

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.logger         import log
from immediate_stats.stat           import Stat, IStat64

from .const   import ShapeKind, STAT, STAT_IGNORE
from .shape   import FieldShape
from .variant import StatEnum, variant
from .reflect import reflect, type_token, is_optional


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class Pool:
    def reset_modifiers(self):
        pass


@dataclasses.dataclass
class DataHero:
    health: Stat
    name: str
    boots: Annotated[Pool, STAT]
    armor: Annotated[Stat, STAT_IGNORE]


class PlainBase:
    health: Stat


class PlainHero(PlainBase):
    speed: IStat64
    count: ClassVar[int] = 0
    note: 'Optional[Stat]'
    mystery: 'DoesNotExist'


class Pair(NamedTuple):
    first: Stat
    second: int


class Mood(enum.Enum):
    HAPPY = 1
    SAD = 2


class Raw(ctypes.Union):
    _fields_ = [('i', ctypes.c_int), ('f', ctypes.c_float)]


class EnumStat(StatEnum):
    Named = variant(stat=Stat, other=int)
    Unnamed = variant(Stat, Annotated[Pool, STAT])
    Other = variant()


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Reflect(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_dataclass(self):
        shape = reflect(DataHero)
        self.assertEqual(shape.name, 'DataHero')
        self.assertIs(shape.kind, ShapeKind.STRUCT)
        self.assertEqual(shape.fields, (
            FieldShape('health', 0, 'Stat'),
            FieldShape('name', 1, 'str'),
            FieldShape('boots', 2, 'Pool', [STAT]),
            FieldShape('armor', 3, 'Stat', [STAT_IGNORE]),
        ))

    def test_plain_class(self):
        shape = reflect(PlainHero)
        self.assertIs(shape.kind, ShapeKind.STRUCT)
        self.assertEqual([each.name for each in shape.fields],
                         ['health', 'speed', 'note', 'mystery'])
        self.assertEqual(shape.fields[0].type_token, 'Stat')
        self.assertEqual(shape.fields[1].type_token, 'IStat64')

        # Evaluated string annotation.
        self.assertIn('Optional', shape.fields[2].type_token)
        self.assertIn('Stat', shape.fields[2].type_token)
        self.assertTrue(shape.fields[2].optional)
        self.assertFalse(shape.fields[0].optional)

        # Unresolvable; kept as text.
        self.assertEqual(shape.fields[3].type_token, 'DoesNotExist')
        self.assert_logged(log.Level.DEBUG, 'DoesNotExist')

    def test_named_tuple(self):
        shape = reflect(Pair)
        self.assertIs(shape.kind, ShapeKind.TUPLE)
        self.assertEqual(shape.fields, (
            FieldShape(None, 0, 'Stat'),
            FieldShape(None, 1, 'int'),
        ))

    def test_python_enum(self):
        shape = reflect(Mood)
        self.assertIs(shape.kind, ShapeKind.ENUM)
        self.assertEqual([each.name for each in shape.variants],
                         ['HAPPY', 'SAD'])
        self.assertTrue(all(each.is_unit for each in shape.variants))

    def test_stat_enum(self):
        shape = reflect(EnumStat)
        self.assertIs(shape.kind, ShapeKind.ENUM)
        named, unnamed, other = shape.variants

        self.assertEqual(named.name, 'Named')
        self.assertIs(named.target, EnumStat.Named)
        self.assertEqual(named.fields, (FieldShape('stat', 0, 'Stat'),
                                        FieldShape('other', 1, 'int')))

        self.assertIs(unnamed.target, EnumStat.Unnamed)
        self.assertEqual(unnamed.fields, (FieldShape(None, 0, 'Stat'),
                                          FieldShape(None, 1, 'Pool',
                                                     [STAT])))

        self.assertTrue(other.is_unit)
        self.assertIs(other.target, EnumStat.Other)

    def test_union(self):
        shape = reflect(Raw)
        self.assertIs(shape.kind, ShapeKind.UNION)

    def test_type_token(self):
        self.assertEqual(type_token(Stat), 'Stat')
        self.assertEqual(type_token('Whatever'), 'Whatever')
        self.assertIn('Stat', type_token(Optional[Stat]))
        self.assertIn('Stat', type_token(list[Stat]))

    def test_is_optional(self):
        self.assertTrue(is_optional(Optional[Stat]))
        self.assertTrue(is_optional(Stat | None))
        self.assertTrue(is_optional('Optional[Stat]'))
        self.assertTrue(is_optional('Stat | None'))
        self.assertFalse(is_optional(Stat))
        self.assertFalse(is_optional(list[Stat]))
        self.assertFalse(is_optional('IStat64'))


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_reflect

if __name__ == '__main__':
    import unittest
    unittest.main()
