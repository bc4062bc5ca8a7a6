# coding: utf-8

'''
What Immediate Stats needs from a host engine.

Nothing here is implemented by us; the host subclasses these (or provides
classes with the same methods) and passes them in.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Callable, Iterable, Tuple, Type

from abc import ABC, abstractmethod

from .const import SystemTick, StatSystems


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

EntityId = Any
'''Whatever the host uses to identify entities.'''

SystemFn = Callable[['StatWorld'], Any]
'''A system: called with the world once per scheduled tick.'''


# -----------------------------------------------------------------------------
# World
# -----------------------------------------------------------------------------

class StatWorld(ABC):
    '''
    Read access to the host's live entities, components, and resources.
    '''

    @abstractmethod
    def components(self, component_type: Type[Any]
                   ) -> Iterable[Tuple[EntityId, Any]]:
        '''
        Yield (entity id, component instance) for every entity that has a
        `component_type` component.
        '''
        ...

    @abstractmethod
    def has(self, entity_id: EntityId, marker_type: Type[Any]) -> bool:
        '''
        True if the entity has a component of `marker_type`.
        '''
        ...

    @abstractmethod
    def resource(self, resource_type: Type[Any]) -> Optional[Any]:
        '''
        The world's `resource_type` instance, or None if it doesn't have one.
        '''
        ...


# -----------------------------------------------------------------------------
# App
# -----------------------------------------------------------------------------

class StatApp(ABC):
    '''
    The host's scheduler and type registry.
    '''

    @abstractmethod
    def add_system(self,
                   tick:   SystemTick,
                   system: SystemFn,
                   label:  StatSystems) -> None:
        '''
        Run `system` every `tick`, as part of the `label` system set.
        '''
        ...

    def register_type(self, registered: Type[Any]) -> None:
        '''
        Register `registered` with the host's type registry, if it has one.
        Does nothing by default.
        '''
        ...
