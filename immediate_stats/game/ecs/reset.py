# coding: utf-8

'''
Systems that reset stat containers living in a host world.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Any, Type

from immediate_stats.logger         import log
from immediate_stats.stat.container import StatContainer

from .host import StatWorld, SystemFn


# -----------------------------------------------------------------------------
# Components
# -----------------------------------------------------------------------------

class PauseStatReset:
    '''
    Marker component: stat containers on an entity that has this are not
    reset.
    '''

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, PauseStatReset)

    def __hash__(self) -> int:
        return hash(PauseStatReset)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# -----------------------------------------------------------------------------
# Reset Functions
# -----------------------------------------------------------------------------

def reset_component_modifiers(world: StatWorld,
                              component_type: Type[StatContainer]) -> int:
    '''
    Calls `reset_modifiers()` on all `component_type` components, except on
    entities with PauseStatReset.

    Returns number of components reset.
    '''
    count = 0
    for entity_id, component in world.components(component_type):
        if world.has(entity_id, PauseStatReset):
            continue
        component.reset_modifiers()
        count += 1
    return count


def reset_resource_modifiers(world: StatWorld,
                             resource_type: Type[StatContainer]) -> bool:
    '''
    Calls `reset_modifiers()` on the `resource_type` resource, if it exists.

    Returns True if it existed.
    '''
    resource = world.resource(resource_type)
    if resource is None:
        return False
    resource.reset_modifiers()
    return True


# -----------------------------------------------------------------------------
# Systems
# -----------------------------------------------------------------------------

def _check_container(stat_type: Type[Any]) -> None:
    if not isinstance(stat_type, type) or not issubclass(stat_type,
                                                         StatContainer):
        raise TypeError(f"{stat_type} is not a StatContainer type. "
                        "Decorate it with @stat_container or give it a "
                        "`reset_modifiers()` method.")


def component_system(component_type: Type[StatContainer]) -> SystemFn:
    '''
    Returns a system that resets all `component_type` components.
    '''
    _check_container(component_type)

    def system(world: StatWorld) -> int:
        return reset_component_modifiers(world, component_type)

    system.__name__ = f"reset_{component_type.__name__}_components"
    system.__qualname__ = system.__name__
    log.debug("Created component reset system for: {}",
              component_type.__qualname__)
    return system


def resource_system(resource_type: Type[StatContainer]) -> SystemFn:
    '''
    Returns a system that resets the `resource_type` resource.
    '''
    _check_container(resource_type)

    def system(world: StatWorld) -> bool:
        return reset_resource_modifiers(world, resource_type)

    system.__name__ = f"reset_{resource_type.__name__}_resource"
    system.__qualname__ = system.__name__
    log.debug("Created resource reset system for: {}",
              resource_type.__qualname__)
    return system
