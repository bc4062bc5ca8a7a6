# coding: utf-8

'''
Constants, enums, and field markers for the `reset_modifiers` generator.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import enum


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

RESET_METHOD = 'reset_modifiers'
'''
Name of the method generated for (and called on) stat containers.
'''

GENERATED_ATTR = '__stat_reset__'
'''
Class attribute the decorator stores the GeneratedReset under.
'''


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

@enum.unique
class ShapeKind(enum.Enum):
    '''
    Which kind of declaration a TypeShape describes.
    '''

    STRUCT = 'struct'
    '''Record with named fields.'''

    TUPLE = 'tuple'
    '''Record with positional fields.'''

    ENUM = 'enum'
    '''Tagged union: a set of variants, each with its own fields.'''

    UNION = 'union'
    '''Untagged union. Never supported.'''

    def __str__(self) -> str:
        return self.value


@enum.unique
class Attribute(enum.Enum):
    '''
    Markers for a field, attached with `typing.Annotated`:

      health: Annotated[Stat, STAT_IGNORE]
      mana:   Annotated[ManaPool, STAT]
    '''

    STAT = 'stat'
    '''Force-include: reset this field even though its type isn't a Stat.'''

    STAT_IGNORE = 'stat_ignore'
    '''Force-exclude: never reset this field, even if it is a Stat.'''

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name


STAT = Attribute.STAT
STAT_IGNORE = Attribute.STAT_IGNORE


@enum.unique
class DiagnosticCode(enum.Enum):
    '''
    Generation-time diagnostics. None of them stop generation on their own.
    '''

    CONFLICT = 'conflict'
    '''Field has both STAT and STAT_IGNORE. STAT_IGNORE wins.'''

    REDUNDANT = 'redundant'
    '''Field is a stat type and also marked STAT.'''

    UNUSED = 'unused'
    '''Type has no stat fields; generated reset does nothing.'''

    def __str__(self) -> str:
        return self.name
