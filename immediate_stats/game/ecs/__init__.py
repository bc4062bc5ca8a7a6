# coding: utf-8

'''
Host engine (ECS) integration: reset stat containers once per tick.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .const  import SystemTick, StatSystems, RESET_TICK
from .host   import StatWorld, StatApp
from .reset  import (PauseStatReset,
                     reset_component_modifiers, reset_resource_modifiers,
                     component_system, resource_system)
from .plugin import (ImmediateStatsPlugin,
                     ResetComponentPlugin, ResetResourcePlugin,
                     AutoPlugin)


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Consts
    # ------------------------------
    'SystemTick',
    'StatSystems',
    'RESET_TICK',

    # ------------------------------
    # Host Interface
    # ------------------------------
    'StatWorld',
    'StatApp',

    # ------------------------------
    # Resetting
    # ------------------------------
    'PauseStatReset',
    'reset_component_modifiers',
    'reset_resource_modifiers',
    'component_system',
    'resource_system',

    # ------------------------------
    # Plugins
    # ------------------------------
    'ImmediateStatsPlugin',
    'ResetComponentPlugin',
    'ResetResourcePlugin',
    'AutoPlugin',
]
