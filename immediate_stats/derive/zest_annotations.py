# coding: utf-8

'''
Unit tests for:
  immediate_stats/derive/reflect.py
  immediate_stats/derive/derive.py

With postponed (string) annotations, for types defined inside functions.
'''

from __future__ import annotations

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Annotated, NamedTuple

import dataclasses

from immediate_stats.zest.base.unit  import ZestBase
from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError
from immediate_stats.stat            import Stat

from .const   import STAT, STAT_IGNORE
from .shape   import FieldShape
from .reflect import reflect
from .derive  import stat_container, generated


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_PostponedAnnotations(ZestBase):

    def set_up(self):
        self.capture_logs(True)

    def test_local_type_ignored(self):
        class LocalStat(Stat):
            pass

        @stat_container
        @dataclasses.dataclass
        class Hero:
            armor: Annotated[LocalStat, STAT_IGNORE]
            health: Stat

        hero = Hero(LocalStat(5, 3), Stat(10, 3))
        hero.reset_modifiers()

        self.assertEqual(hero.armor.bonus, 3)
        self.assertEqual(hero.health.bonus, 0)
        self.assertEqual(generated(Hero).arms, ((None, ('health', )), ))

    def test_local_type_included(self):
        class Pool:
            def __init__(self):
                self.resets = 0

            def reset_modifiers(self):
                self.resets += 1

        @stat_container
        @dataclasses.dataclass
        class Hero:
            pool: Annotated[Pool, STAT]
            name: str

        hero = Hero(Pool(), 'Jeff')
        hero.reset_modifiers()
        self.assertEqual(hero.pool.resets, 1)
        self.assert_not_logged(log.Level.WARNING)

    def test_local_type_with_arguments(self):
        class Pool:
            resets = 0

            def reset_modifiers(self):
                self.resets += 1

        @stat_container(config=None)
        class Pair(NamedTuple):
            first: Annotated[Pool, STAT]
            second: Stat

        pair = Pair(Pool(), Stat(1, 2))
        pair.reset_modifiers()
        self.assertEqual(pair.first.resets, 1)
        self.assertEqual(pair.second, Stat(1))

    def test_reflect_with_locals(self):
        class LocalStat(Stat):
            pass

        class Hero:
            armor: Annotated[LocalStat, STAT_IGNORE]
            name: str

        armor, name = reflect(Hero, locals()).fields
        self.assertEqual(armor.attributes, frozenset([STAT_IGNORE]))
        self.assertTrue(armor.type_token.endswith('LocalStat'))
        self.assertEqual(name, FieldShape('name', 1, 'str'))

    def test_unresolved_marker_raises(self):
        with self.assertRaises(DeriveError):
            @stat_container
            @dataclasses.dataclass
            class Hero:
                armor: Annotated[DoesNotExist, STAT_IGNORE]  # noqa: F821
                health: Stat

        self.assert_logged(log.Level.ERROR, 'Hero.armor', count=1)

    def test_unresolved_plain_field(self):
        @stat_container
        class Hero:
            mystery: DoesNotExist  # noqa: F821
            health: Stat

        hero = Hero()
        hero.health = Stat(10, 3)
        hero.reset_modifiers()

        self.assertEqual(hero.health, Stat(10))
        self.assert_logged(log.Level.DEBUG, 'DoesNotExist')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.derive.zest_annotations

if __name__ == '__main__':
    import unittest
    unittest.main()
