# coding: utf-8

'''
Tests for reset.py: reset systems run against a fake host world.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Any, Dict

import dataclasses

from immediate_stats.zest.base.unit import ZestBase
from immediate_stats.stat           import Stat
from immediate_stats.derive         import stat_container

from .host  import StatWorld
from .reset import (PauseStatReset,
                    reset_component_modifiers, reset_resource_modifiers,
                    component_system, resource_system)


# -----------------------------------------------------------------------------
# Test Helpers
# -----------------------------------------------------------------------------

class FakeWorld(StatWorld):
    '''
    Entities are ints; components are kept by type.
    '''

    def __init__(self) -> None:
        self.entities: Dict[int, Dict[type, Any]] = {}
        self.resources: Dict[type, Any] = {}

    def spawn(self, *components: Any) -> int:
        entity_id = len(self.entities)
        self.entities[entity_id] = {type(each): each for each in components}
        return entity_id

    def components(self, component_type):
        for entity_id, components in self.entities.items():
            if component_type in components:
                yield entity_id, components[component_type]

    def has(self, entity_id, marker_type):
        return marker_type in self.entities[entity_id]

    def resource(self, resource_type):
        return self.resources.get(resource_type, None)


@stat_container
@dataclasses.dataclass
class Movement:
    speed: Stat
    name: str = ''


@stat_container
@dataclasses.dataclass
class Weather:
    wind: Stat


def buffed(base=10):
    stat = Stat(base)
    stat += 5
    stat *= 2.0
    return stat


# -----------------------------------------------------------------------------
# Test Code
# -----------------------------------------------------------------------------

class Test_Reset(ZestBase):

    def set_up(self):
        self.capture_logs(True)
        self.world = FakeWorld()

    def test_components(self):
        first = Movement(buffed())
        second = Movement(buffed(3))
        self.world.spawn(first)
        self.world.spawn(second)
        self.world.spawn(Weather(buffed()))

        self.assertEqual(reset_component_modifiers(self.world, Movement), 2)
        self.assertEqual(first.speed, Stat(10))
        self.assertEqual(second.speed, Stat(3))

    def test_paused(self):
        running = Movement(buffed())
        paused = Movement(buffed())
        self.world.spawn(running)
        self.world.spawn(paused, PauseStatReset())

        self.assertEqual(reset_component_modifiers(self.world, Movement), 1)
        self.assertEqual(running.speed, Stat(10))
        self.assertEqual(paused.speed.total(), 30)

    def test_no_components(self):
        self.assertEqual(reset_component_modifiers(self.world, Movement), 0)

    def test_resource(self):
        self.assertFalse(reset_resource_modifiers(self.world, Weather))

        weather = Weather(buffed())
        self.world.resources[Weather] = weather
        self.assertTrue(reset_resource_modifiers(self.world, Weather))
        self.assertEqual(weather.wind, Stat(10))

    def test_component_system(self):
        system = component_system(Movement)
        self.assertEqual(system.__name__, 'reset_Movement_components')

        movement = Movement(buffed())
        self.world.spawn(movement)
        self.assertEqual(system(self.world), 1)
        self.assertEqual(movement.speed, Stat(10))

    def test_resource_system(self):
        system = resource_system(Weather)
        self.assertEqual(system.__name__, 'reset_Weather_resource')

        weather = Weather(buffed())
        self.world.resources[Weather] = weather
        self.assertTrue(system(self.world))
        self.assertEqual(weather.wind, Stat(10))

    def test_stat_is_a_component(self):
        # Stat itself is a StatContainer, so it can be used directly.
        speed = buffed()
        self.world.spawn(speed)
        self.assertEqual(component_system(Stat)(self.world), 1)
        self.assertEqual(speed, Stat(10))

    def test_not_a_container(self):
        with self.assertRaises(TypeError):
            component_system(str)
        with self.assertRaises(TypeError):
            resource_system(Movement(buffed()))

    def test_pause_marker(self):
        self.assertEqual(PauseStatReset(), PauseStatReset())
        self.assertEqual(repr(PauseStatReset()), 'PauseStatReset()')


# --------------------------------Unit Testing---------------------------------
# --                      Main Command Line Entry Point                      --
# -----------------------------------------------------------------------------

# Can't just run file from here... Do:
#   python -m immediate_stats.game.ecs.zest_reset

if __name__ == '__main__':
    import unittest
    unittest.main()
