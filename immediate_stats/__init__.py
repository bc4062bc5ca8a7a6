# coding: utf-8

'''
Immediate Stats: game stats whose bonuses and multipliers are rebuilt every
tick.

  speed = Stat(10)
  speed *= 2.0
  speed += 5
  speed.total()            # 30
  speed.reset_modifiers()
  speed.total()            # 10

`@stat_container` generates `reset_modifiers()` for your own types that hold
stats. `immediate_stats.game.ecs` schedules those resets in a host engine.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .base.exceptions import ImmediateStatsError, DeriveError, ConfigError
from .base.numbers    import NumKind
from .stat            import (StatContainer,
                              Modifier, modifier_type,
                              IModifier32, IModifier64,
                              FModifier32, FModifier64,
                              IModifier, FModifier,
                              Stat, stat_type,
                              IStat32, IStat64, FStat32, FStat64,
                              IStat, FStat)
from .derive          import (stat_container, STAT, STAT_IGNORE,
                              StatEnum, variant)


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Errors
    # ------------------------------
    'ImmediateStatsError',
    'DeriveError',
    'ConfigError',

    # ------------------------------
    # Stats & Modifiers
    # ------------------------------
    'NumKind',
    'StatContainer',
    'Modifier',
    'modifier_type',
    'IModifier32',
    'IModifier64',
    'FModifier32',
    'FModifier64',
    'IModifier',
    'FModifier',
    'Stat',
    'stat_type',
    'IStat32',
    'IStat64',
    'FStat32',
    'FStat64',
    'IStat',
    'FStat',

    # ------------------------------
    # Derive
    # ------------------------------
    'stat_container',
    'STAT',
    'STAT_IGNORE',
    'StatEnum',
    'variant',
]
