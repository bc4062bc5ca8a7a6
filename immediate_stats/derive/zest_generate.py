# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/generate.py
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import types

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError
from immediate_stats.data.config     import Configuration
from immediate_stats.stat            import Stat

from .const    import ShapeKind, DiagnosticCode, STAT, STAT_IGNORE
from .shape    import FieldShape, VariantShape, TypeShape
from .generate import generate


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

STRUCT_SOURCE = '''\
def reset_modifiers(self):
    self.health.reset_modifiers()
    self.speed.reset_modifiers()
'''

TUPLE_SOURCE = '''\
def reset_modifiers(self):
    self[0].reset_modifiers()
    self[2].reset_modifiers()
'''

ENUM_SOURCE = '''\
def reset_modifiers(self):
    variant = type(self)
    if variant is _variant_0:
        self.stat.reset_modifiers()
    elif variant is _variant_1:
        self[0].reset_modifiers()
    else:
        pass
'''

EMPTY_SOURCE = '''\
def reset_modifiers(self):
    pass
'''


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class NamedVariant:
    def __init__(self, stat, other):
        self.stat = stat
        self.other = other


class PositionalVariant(list):
    pass


def modified(base=10):
    return Stat(base, 3, 1.5)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Generate(ZestBase):

    def pre_set_up(self):
        self.config = Configuration(data={})

    def set_up(self):
        self.capture_logs(True)

    # -------------------------------------------------------------------------
    # Struct / Tuple
    # -------------------------------------------------------------------------

    def test_struct(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat'),
            FieldShape('name', 1, 'str'),
            FieldShape('speed', 2, 'IStat64'),
        ])
        result = generate(shape)

        self.assertEqual(result.source, STRUCT_SOURCE)
        self.assertEqual(result.arms, ((None, ('health', 'speed')), ))
        self.assertEqual(result.diagnostics, ())
        self.assertFalse(result.is_empty)
        self.assertEqual(result.type_name, 'Hero')
        self.assertIs(result.kind, ShapeKind.STRUCT)

    def test_struct_compiled(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat'),
            FieldShape('name', 1, 'str'),
            FieldShape('speed', 2, 'IStat64'),
        ])
        reset = generate(shape).compile()

        hero = types.SimpleNamespace(health=modified(),
                                     name='Jeff',
                                     speed=modified(4))
        reset(hero)

        self.assertEqual(hero.health, Stat(10))
        self.assertEqual(hero.speed, Stat(4))
        self.assertEqual(hero.name, 'Jeff')

    def test_tuple(self):
        shape = TypeShape('Triple', ShapeKind.TUPLE, fields=[
            FieldShape(None, 0, 'Stat'),
            FieldShape(None, 1, 'int'),
            FieldShape(None, 2, 'Pool', [STAT]),
        ])
        result = generate(shape)

        self.assertEqual(result.source, TUPLE_SOURCE)
        self.assertEqual(result.arms, ((None, (0, 2)), ))

        triple = [modified(), 5, modified(1)]
        result.compile()(triple)
        self.assertEqual(triple, [Stat(10), 5, Stat(1)])

    def test_excluded_field_untouched(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat', [STAT_IGNORE]),
            FieldShape('mana', 1, 'Stat'),
        ])
        result = generate(shape)
        self.assertEqual(result.arms, ((None, ('mana', )), ))
        self.assertNotIn('health', result.source)

    # -------------------------------------------------------------------------
    # Enum
    # -------------------------------------------------------------------------

    def enum_shape(self, named=NamedVariant, positional=PositionalVariant):
        return TypeShape('EnumStat', ShapeKind.ENUM, variants=[
            VariantShape('Named', [FieldShape('stat', 0, 'Stat'),
                                   FieldShape('other', 1, 'int')],
                         target=named),
            VariantShape('Unnamed', [FieldShape(None, 0, 'Stat'),
                                     FieldShape(None, 1, 'int')],
                         target=positional),
            VariantShape('Other'),
        ])

    def test_enum(self):
        result = generate(self.enum_shape())

        self.assertEqual(result.source, ENUM_SOURCE)
        self.assertEqual(result.arms, (('Named', ('stat', )),
                                       ('Unnamed', (0, ))))

    def test_enum_compiled(self):
        reset = generate(self.enum_shape()).compile()

        named = NamedVariant(modified(), 0)
        reset(named)
        self.assertEqual(named.stat, Stat(10))

        positional = PositionalVariant([modified(), 0])
        reset(positional)
        self.assertEqual(positional[0], Stat(10))

        # Fallback arm: nothing happens.
        reset(object())

    def test_enum_skips_variants_without_stats(self):
        shape = TypeShape('Status', ShapeKind.ENUM, variants=[
            VariantShape('Normal'),
            VariantShape('Named', [FieldShape('note', 0, 'str')]),
            VariantShape('Buffed', [FieldShape('speed', 0, 'Stat')],
                         target=NamedVariant),
        ])
        result = generate(shape)

        self.assertEqual(result.arms, (('Buffed', ('speed', )), ))
        self.assertIn('if variant is _variant_2:', result.source)
        self.assertNotIn('elif', result.source)

    def test_enum_missing_target(self):
        result = generate(self.enum_shape(named=None))
        with self.assertRaises(DeriveError):
            result.compile()

    # -------------------------------------------------------------------------
    # Empty
    # -------------------------------------------------------------------------

    def empty_shape(self):
        return TypeShape('Plain', ShapeKind.STRUCT, fields=[
            FieldShape('name', 0, 'str'),
            FieldShape('health', 1, 'Stat', [STAT_IGNORE]),
        ])

    def test_empty_warns(self):
        result = generate(self.empty_shape())

        self.assertEqual(result.source, EMPTY_SOURCE)
        self.assertTrue(result.is_empty)
        self.assertEqual([each.code for each in result.diagnostics],
                         [DiagnosticCode.UNUSED])
        self.assertEqual(result.diagnostics[0].location, 'Plain')

        # Compiles to a no-op.
        result.compile()(object())

    def test_empty_ignore(self):
        config = Configuration(data={'derive': {'empty-container': 'ignore'}})
        result = generate(self.empty_shape(), config)

        self.assertEqual(result.source, EMPTY_SOURCE)
        self.assertEqual(result.diagnostics, ())

    def test_empty_error(self):
        config = Configuration(data={'derive': {'empty-container': 'error'}})
        with self.assertRaises(DeriveError):
            generate(self.empty_shape(), config)
        self.assert_logged(log.Level.ERROR, 'no stat fields')

    def test_unit_only_enum_is_empty(self):
        shape = TypeShape('Mood', ShapeKind.ENUM,
                          variants=[VariantShape('HAPPY'),
                                    VariantShape('SAD')])
        result = generate(shape)
        self.assertEqual(result.source, EMPTY_SOURCE)
        self.assertEqual([each.code for each in result.diagnostics],
                         [DiagnosticCode.UNUSED])

    # -------------------------------------------------------------------------
    # Union
    # -------------------------------------------------------------------------

    def test_union_rejected(self):
        with self.assertRaises(DeriveError):
            generate(TypeShape('Raw', ShapeKind.UNION))
        self.assert_logged(log.Level.ERROR, 'Unions are not supported')

    # -------------------------------------------------------------------------
    # Optional Fields
    # -------------------------------------------------------------------------

    def test_optional_stat_rejected(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat'),
            FieldShape('shield', 1, 'typing.Optional[Stat]', optional=True),
        ])
        with self.assertRaises(DeriveError):
            generate(shape)
        self.assert_logged(log.Level.ERROR, "'Hero.shield' is optional",
                           count=1)

    def test_optional_variant_field_rejected(self):
        shape = TypeShape('Status', ShapeKind.ENUM, variants=[
            VariantShape('Buffed', [FieldShape(None, 0, 'Optional[Stat]',
                                               optional=True)]),
        ])
        with self.assertRaises(DeriveError):
            generate(shape)
        self.assert_logged(log.Level.ERROR, "'Status.Buffed.0' is optional")

    def test_optional_ignored_or_not_stat(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat'),
            FieldShape('shield', 1, 'Optional[Stat]', [STAT_IGNORE],
                       optional=True),
            FieldShape('note', 2, 'Optional[str]', optional=True),
        ])
        result = generate(shape)
        self.assertEqual(result.arms, ((None, ('health', )), ))

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def test_diagnostics_collected_not_logged(self):
        shape = TypeShape('Hero', ShapeKind.STRUCT, fields=[
            FieldShape('health', 0, 'Stat', [STAT]),
            FieldShape('pool', 1, 'Pool', [STAT, STAT_IGNORE]),
        ])
        result = generate(shape)

        self.assertEqual([each.code for each in result.diagnostics],
                         [DiagnosticCode.REDUNDANT, DiagnosticCode.CONFLICT])
        self.assert_not_logged(log.Level.WARNING)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_generate

if __name__ == '__main__':
    import unittest
    unittest.main()
