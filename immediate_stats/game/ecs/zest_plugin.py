# coding: utf-8

'''
Tests for plugin.py: plugins built into a fake host app.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import dataclasses

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.logger         import log
from immediate_stats.stat           import Stat, IStat32, FModifier64
from immediate_stats.derive         import stat_container

from .const  import SystemTick, StatSystems, RESET_TICK
from .host   import StatApp
from .reset  import PauseStatReset
from .plugin import (ImmediateStatsPlugin,
                     ResetComponentPlugin, ResetResourcePlugin,
                     AutoPlugin)


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class FakeApp(StatApp):
    def __init__(self) -> None:
        self.systems = []
        self.types = []

    def add_system(self, tick, system, label):
        self.systems.append((tick, system, label))

    def register_type(self, registered):
        self.types.append(registered)


class SchedulerOnly(StatApp):
    def __init__(self) -> None:
        self.systems = []

    def add_system(self, tick, system, label):
        self.systems.append((tick, system, label))


@stat_container
@dataclasses.dataclass
class Movement:
    speed: Stat


@stat_container
@dataclasses.dataclass
class Weather:
    wind: Stat


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Ticks(ZestBase):

    def test_reset_tick(self):
        self.assertIs(RESET_TICK, SystemTick.PRE)
        self.assertEqual(SystemTick('pre'), RESET_TICK)
        self.assertEqual(str(StatSystems.RESET), 'immediate_stats.reset')


class Test_Plugins(ZestBase):

    def set_up(self):
        self.capture_logs(True)
        self.app = FakeApp()

    def test_type_registration(self):
        ImmediateStatsPlugin().build(self.app)
        self.assertIn(PauseStatReset, self.app.types)
        self.assertIn(IStat32, self.app.types)
        self.assertIn(FModifier64, self.app.types)
        self.assertEqual(len(self.app.types), 9)

    def test_type_registration_optional(self):
        # Hosts without a type registry get the default no-op.
        app = SchedulerOnly()
        ImmediateStatsPlugin().build(app)
        self.assertEqual(app.systems, [])

    def test_component_plugin(self):
        plugin = ResetComponentPlugin(Movement)
        plugin.build(self.app)

        self.assertEqual(len(self.app.systems), 1)
        tick, system, label = self.app.systems[0]
        self.assertIs(tick, SystemTick.PRE)
        self.assertIs(system, plugin.system)
        self.assertIs(label, StatSystems.RESET)
        self.assertEqual(repr(plugin), 'ResetComponentPlugin(Movement)')

    def test_resource_plugin(self):
        plugin = ResetResourcePlugin(Weather)
        plugin.build(self.app)

        tick, system, label = self.app.systems[0]
        self.assertIs(tick, SystemTick.PRE)
        self.assertEqual(system.__name__, 'reset_Weather_resource')
        self.assertIs(label, StatSystems.RESET)

    def test_not_a_container(self):
        with self.assertRaises(TypeError):
            ResetComponentPlugin(int)
        with self.assertRaises(TypeError):
            ResetResourcePlugin(int)


class Test_AutoPlugin(ZestBase):

    def set_up(self):
        self.capture_logs(True)
        self.app = FakeApp()
        self.auto = AutoPlugin('stats')

    def test_empty(self):
        self.auto.build(self.app)
        self.assertEqual(self.app.systems, [])
        self.assertEqual(self.auto.plugins, [])

    def test_add_and_build(self):
        self.auto.add_component(Movement)
        self.auto.add_resource(Weather)
        self.auto.build(self.app)

        self.assertEqual([system.__name__
                          for _, system, _ in self.app.systems],
                         ['reset_Movement_components',
                          'reset_Weather_resource'])
        self.assertTrue(all(tick is RESET_TICK
                            for tick, _, _ in self.app.systems))

    def test_duplicates_ignored(self):
        self.auto.add_component(Movement)
        self.auto.add_component(Movement)
        self.assertEqual(len(self.auto.plugins), 1)
        self.assert_logged(log.Level.DEBUG, 'already registered', count=1)

        # Same type in the other role is fine.
        self.auto.add_resource(Movement)
        self.assertEqual(len(self.auto.plugins), 2)

    def test_plugins_is_a_copy(self):
        self.auto.add_component(Movement)
        self.auto.plugins.clear()
        self.assertEqual(len(self.auto.plugins), 1)


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.game.ecs.zest_plugin

if __name__ == '__main__':
    import unittest
    unittest.main()
