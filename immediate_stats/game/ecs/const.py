# coding: utf-8

'''
Consts for scheduling stat resets in a host engine's tick.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import enum


# -----------------------------------------------------------------------------
# Ticking
# -----------------------------------------------------------------------------

@enum.unique
class SystemTick(enum.Enum):
    '''
    The step of a host engine's game-loop tick that stat systems run in.
    '''

    PRE = 'pre'
    '''
    Tick before the host's standard update. Stat modifiers are reset here so
    that the host's systems can re-apply this tick's buffs and debuffs.
    '''


RESET_TICK = SystemTick.PRE
'''
Tick all reset systems are scheduled in.
'''


@enum.unique
class StatSystems(enum.Enum):
    '''
    Labels for sets of systems, so host systems can order themselves against
    ours.
    '''

    RESET = 'immediate_stats.reset'
    '''All the systems that call `reset_modifiers()`.'''

    def __str__(self) -> str:
        return self.value
