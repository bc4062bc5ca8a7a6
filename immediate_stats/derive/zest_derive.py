# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/derive.py

End-to-end: decorate real classes and reset them.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Annotated, NamedTuple, Optional

import ctypes
import dataclasses
import enum

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError
from immediate_stats.base.numbers    import NumKind
from immediate_stats.data.config     import Configuration
from immediate_stats.stat            import (Stat, FStat64, StatContainer,
                                             stat_type)
from immediate_stats.game.ecs.plugin import (AutoPlugin,
                                             ResetComponentPlugin,
                                             ResetResourcePlugin)

from .const   import STAT, STAT_IGNORE, GENERATED_ATTR
from .variant import StatEnum, variant
from .derive  import stat_container, generated, clear_cache


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class Pool:
    '''Not a stat, but resettable.'''

    def __init__(self):
        self.resets = 0

    def reset_modifiers(self):
        self.resets += 1


def modified(base=10):
    return Stat(base, 3, 1.5)


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Derive(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    # -------------------------------------------------------------------------
    # Struct
    # -------------------------------------------------------------------------

    def test_struct(self):
        @stat_container
        @dataclasses.dataclass
        class Hero:
            health: Stat
            name: str

        hero = Hero(modified(), 'Jeff')
        self.assertEqual(hero.health.total(), 19)

        hero.reset_modifiers()
        self.assertEqual(hero.health.total(), 10)
        self.assertEqual(hero.health, Stat(10))
        self.assertEqual(hero.name, 'Jeff')

    def test_registered_as_container(self):
        @stat_container
        class Hero:
            health: Stat

        self.assertTrue(issubclass(Hero, StatContainer))
        self.assertTrue(Hero.reset_modifiers.__qualname__.endswith(
            'Hero.reset_modifiers'))
        self.assertEqual(Hero.reset_modifiers.__module__, __name__)
        self.assertIs(getattr(Hero, GENERATED_ATTR), generated(Hero))

    def test_plain_class_with_base(self):
        class Base:
            health: Stat

        @stat_container
        class Hero(Base):
            def __init__(self):
                self.health = modified()
                self.power = modified(2)

            power: FStat64

        hero = Hero()
        hero.reset_modifiers()
        self.assertEqual(hero.health, Stat(10))
        self.assertEqual(hero.power, Stat(2))

    def test_generic_stat_kinds(self):
        Wide = stat_type(NumKind.I64, NumKind.F32)

        @stat_container
        @dataclasses.dataclass
        class Hero:
            power: Wide

        hero = Hero(Wide(1, 2, 3.0))
        hero.reset_modifiers()
        self.assertEqual(hero.power, Wide(1))

    # -------------------------------------------------------------------------
    # Tuple
    # -------------------------------------------------------------------------

    def test_tuple_speed(self):
        @stat_container
        class Speed(NamedTuple):
            value: Stat

        speed = Speed(Stat(10))
        stat = speed[0]
        stat *= 2.0
        stat += 5
        self.assertEqual(speed[0].total(), 30)

        speed.reset_modifiers()
        self.assertEqual(speed[0].total(), 10)

    def test_tuple_only_stat_fields(self):
        @stat_container
        class Pair(NamedTuple):
            first: Stat
            second: Annotated[Stat, STAT_IGNORE]

        pair = Pair(modified(), modified())
        pair.reset_modifiers()
        self.assertEqual(pair.first, Stat(10))
        self.assertEqual(pair.second, modified())

    # -------------------------------------------------------------------------
    # Enum
    # -------------------------------------------------------------------------

    def test_enum(self):
        @stat_container
        class EnumStat(StatEnum):
            Named = variant(stat=Stat, other=int)
            Unnamed = variant(Stat, int)
            Other = variant()

        named = EnumStat.Named(stat=modified(), other=0)
        named.reset_modifiers()
        self.assertEqual(named, EnumStat.Named(stat=Stat(10), other=0))

        unnamed = EnumStat.Unnamed(modified(), 0)
        unnamed.reset_modifiers()
        self.assertEqual(unnamed, EnumStat.Unnamed(Stat(10), 0))

        other = EnumStat.Other()
        other.reset_modifiers()
        self.assertEqual(other, EnumStat.Other())

        self.assertIsInstance(named, StatContainer)

    def test_python_enum_is_unused(self):
        @stat_container
        class Mood(enum.Enum):
            HAPPY = 1
            SAD = 2

        Mood.HAPPY.reset_modifiers()
        self.assert_logged(log.Level.WARNING, 'Unused', count=1)

    # -------------------------------------------------------------------------
    # Markers
    # -------------------------------------------------------------------------

    def test_include_and_exclude(self):
        @stat_container
        @dataclasses.dataclass
        class Hero:
            pool: Annotated[Pool, STAT]
            armor: Annotated[Stat, STAT_IGNORE]
            health: Stat

        hero = Hero(Pool(), modified(5), modified())
        hero.reset_modifiers()

        self.assertEqual(hero.pool.resets, 1)
        self.assertEqual(hero.armor, modified(5))
        self.assertEqual(hero.health, Stat(10))

        # Excluded stats can still be reset directly.
        hero.armor.reset_modifiers()
        self.assertEqual(hero.armor, Stat(5))

        self.assert_not_logged(log.Level.WARNING)

    def test_conflict(self):
        @stat_container
        @dataclasses.dataclass
        class Hero:
            pool: Annotated[Pool, STAT, STAT_IGNORE]
            health: Stat

        hero = Hero(Pool(), modified())
        hero.reset_modifiers()

        self.assertEqual(hero.pool.resets, 0)
        self.assert_logged(log.Level.WARNING, 'Hero.pool', count=1)
        self.assert_logged(log.Level.WARNING, 'overruled')

    def test_redundant(self):
        @stat_container
        @dataclasses.dataclass
        class Hero:
            health: Annotated[Stat, STAT]

        hero = Hero(modified())
        hero.reset_modifiers()

        self.assertEqual(hero.health, Stat(10))
        self.assert_logged(log.Level.WARNING, 'Unnecessary', count=1)

    # -------------------------------------------------------------------------
    # Empty / Errors
    # -------------------------------------------------------------------------

    def test_unused(self):
        @stat_container
        class Empty:
            name: str

        Empty().reset_modifiers()
        self.assert_logged(log.Level.WARNING, 'Unused `@stat_container`',
                           count=1)

    def test_unused_error_policy(self):
        config = Configuration(data={'derive': {'empty-container': 'error'}})
        with self.assertRaises(DeriveError):
            @stat_container(config=config)
            class Empty:
                name: str

    def test_union(self):
        with self.assertRaises(DeriveError):
            @stat_container
            class Raw(ctypes.Union):
                _fields_ = [('i', ctypes.c_int)]

    def test_optional_stat(self):
        with self.assertRaises(DeriveError):
            @stat_container
            @dataclasses.dataclass
            class Hero:
                health: Stat
                shield: Optional[Stat] = None

        self.assert_logged(log.Level.ERROR, 'Hero.shield', count=1)

        @stat_container
        @dataclasses.dataclass
        class Guarded:
            health: Stat
            shield: Annotated[Optional[Stat], STAT_IGNORE] = None

        guarded = Guarded(modified())
        guarded.reset_modifiers()
        self.assertEqual(guarded.health, Stat(10))
        self.assertIsNone(guarded.shield)

    def test_not_a_class(self):
        with self.assertRaises(DeriveError):
            stat_container(modified)

    def test_hand_written_reset(self):
        with self.assertRaises(DeriveError):
            @stat_container
            class Hero:
                health: Stat

                def reset_modifiers(self):
                    pass

    # -------------------------------------------------------------------------
    # Nesting / Order
    # -------------------------------------------------------------------------

    def test_nested_container(self):
        @stat_container
        @dataclasses.dataclass
        class Movement:
            speed: Stat
            jump: Stat

        @stat_container
        @dataclasses.dataclass
        class Hero:
            health: Stat
            movement: Annotated[Movement, STAT]

        hero = Hero(modified(), Movement(modified(5), modified(2)))
        hero.reset_modifiers()

        self.assertEqual(hero.health, Stat(10))
        self.assertEqual(hero.movement.speed, Stat(5))
        self.assertEqual(hero.movement.jump, Stat(2))
        self.assertIsInstance(hero.movement, StatContainer)
        self.assert_not_logged(log.Level.WARNING)

    def test_reset_order(self):
        order = []

        class Recorder:
            def __init__(self, name):
                self.name = name

            def reset_modifiers(self):
                order.append(self.name)

        @stat_container
        class Hero:
            third: Annotated[Recorder, STAT]
            first: Annotated[Recorder, STAT]
            skipped: Annotated[Recorder, STAT_IGNORE]
            second: Annotated[Recorder, STAT]

        hero = Hero()
        for name in ('first', 'second', 'third', 'skipped'):
            setattr(hero, name, Recorder(name))

        hero.reset_modifiers()
        self.assertEqual(order, ['third', 'first', 'second'])

        @stat_container
        class Status(StatEnum):
            Buffed = variant(Annotated[Recorder, STAT],
                             int,
                             Annotated[Recorder, STAT])

        order.clear()
        Status.Buffed(Recorder('a'), 0, Recorder('b')).reset_modifiers()
        self.assertEqual(order, ['a', 'b'])

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def test_generated_once(self):
        class Hero:
            health: Annotated[Stat, STAT]

        stat_container(Hero)
        first = generated(Hero)
        stat_container(Hero)

        self.assertIs(generated(Hero), first)
        self.assert_logged(log.Level.WARNING, 'Unnecessary', count=1)

    def test_clear_cache(self):
        @stat_container
        class Hero:
            health: Stat

        self.assertIsNotNone(generated(Hero))
        clear_cache()
        self.assertIsNone(generated(Hero))
        # Still has its method.
        self.assertTrue(callable(Hero.reset_modifiers))

    # -------------------------------------------------------------------------
    # Automatic Plugins
    # -------------------------------------------------------------------------

    def test_component_and_resource(self):
        auto = AutoPlugin('stats')

        @stat_container(component=auto)
        class Movement:
            speed: Stat

        @stat_container(resource=[auto])
        class Weather:
            wind: Stat

        plugins = auto.plugins
        self.assertEqual(len(plugins), 2)
        self.assertIsInstance(plugins[0], ResetComponentPlugin)
        self.assertIs(plugins[0].component_type, Movement)
        self.assertIsInstance(plugins[1], ResetResourcePlugin)
        self.assertIs(plugins[1].resource_type, Weather)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_derive

if __name__ == '__main__':
    import unittest
    unittest.main()
