# coding: utf-8

'''
Stats, modifiers, and the StatContainer capability.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .container import StatContainer
from .modifier import (Modifier, modifier_type,
                       IModifier32, IModifier64, FModifier32, FModifier64,
                       IModifier, FModifier)
from .stat import (Stat, stat_type,
                   IStat32, IStat64, FStat32, FStat64,
                   IStat, FStat)


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Capability
    # ------------------------------
    'StatContainer',

    # ------------------------------
    # Modifier
    # ------------------------------
    'Modifier',
    'modifier_type',
    'IModifier32',
    'IModifier64',
    'FModifier32',
    'FModifier64',
    'IModifier',
    'FModifier',

    # ------------------------------
    # Stat
    # ------------------------------
    'Stat',
    'stat_type',
    'IStat32',
    'IStat64',
    'FStat32',
    'FStat64',
    'IStat',
    'FStat',
]
