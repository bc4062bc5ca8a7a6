# coding: utf-8

'''
Plugins: bundles of registrations to `build()` into a host StatApp.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Any, Type, List

from immediate_stats.logger         import log
from immediate_stats.stat           import (IStat32, IStat64,
                                            FStat32, FStat64,
                                            IModifier32, IModifier64,
                                            FModifier32, FModifier64)
from immediate_stats.stat.container import StatContainer

from .const import RESET_TICK, StatSystems
from .host  import StatApp
from .reset import PauseStatReset, component_system, resource_system


# -----------------------------------------------------------------------------
# Type Registration
# -----------------------------------------------------------------------------

class ImmediateStatsPlugin:
    '''
    Registers all of Immediate Stats' types with the app's type registry.
    '''

    TYPES = (
        PauseStatReset,
        IStat32, IStat64, FStat32, FStat64,
        IModifier32, IModifier64, FModifier32, FModifier64,
    )

    def build(self, app: StatApp) -> None:
        for each in self.TYPES:
            app.register_type(each)


# -----------------------------------------------------------------------------
# Reset Plugins
# -----------------------------------------------------------------------------

class ResetComponentPlugin:
    '''
    Resets all `component_type` components every PRE tick.
    '''

    def __init__(self, component_type: Type[StatContainer]) -> None:
        self.component_type: Type[StatContainer] = component_type
        self.system = component_system(component_type)

    def build(self, app: StatApp) -> None:
        app.add_system(RESET_TICK, self.system, StatSystems.RESET)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.component_type.__qualname__})")


class ResetResourcePlugin:
    '''
    Resets the `resource_type` resource every PRE tick.
    '''

    def __init__(self, resource_type: Type[StatContainer]) -> None:
        self.resource_type: Type[StatContainer] = resource_type
        self.system = resource_system(resource_type)

    def build(self, app: StatApp) -> None:
        app.add_system(RESET_TICK, self.system, StatSystems.RESET)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.resource_type.__qualname__})")


# -----------------------------------------------------------------------------
# Automatic Registration
# -----------------------------------------------------------------------------

class AutoPlugin:
    '''
    Collects stat container types as they are declared, then builds a reset
    plugin for each of them:

      stats = AutoPlugin('stats')

      @stat_container(component=stats)
      class Movement:
          speed: Stat

      stats.build(app)
    '''

    def __init__(self, name: str) -> None:
        self.name: str = name

        self._plugins: List[Any] = []
        '''Reset plugins, in registration order.'''

        self._registered: set = set()
        '''(type, 'component'/'resource') pairs already added.'''

    def _add(self,
             registered:  Type[Any],
             role:        str,
             plugin_type: type) -> None:
        key = (registered, role)
        if key in self._registered:
            log.debug("AutoPlugin '{}': {} already registered as a {}.",
                      self.name, registered.__qualname__, role)
            return
        self._registered.add(key)
        self._plugins.append(plugin_type(registered))

    def add_component(self, component_type: Type[StatContainer]) -> None:
        self._add(component_type, 'component', ResetComponentPlugin)

    def add_resource(self, resource_type: Type[StatContainer]) -> None:
        self._add(resource_type, 'resource', ResetResourcePlugin)

    @property
    def plugins(self) -> List[Any]:
        return list(self._plugins)

    def build(self, app: StatApp) -> None:
        for plugin in self._plugins:
            plugin.build(app)
        log.debug("AutoPlugin '{}' built {} reset plugin(s).",
                  self.name, len(self._plugins))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self._plugins!r})"
