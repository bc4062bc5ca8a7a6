# coding: utf-8

'''
Decides which fields of a type get reset.

A field is a stat field if its type name contains the stat-type token
(default "Stat") or it is marked STAT, and it is not marked STAT_IGNORE.

The type-name check is a plain substring match, so e.g. a
`StatisticsTracker` field counts as a stat. Use STAT_IGNORE on it.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, List

from immediate_stats.data.config import Configuration

from .const       import STAT, STAT_IGNORE
from .shape       import FieldShape
from .diagnostics import Diagnostic
from .            import diagnostics


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class FieldClass:
    '''
    Classification result for one field.
    '''

    def __init__(self,
                 field:       FieldShape,
                 is_stat:     bool,
                 diagnostics: List[Diagnostic]) -> None:
        self.field: FieldShape = field
        self.is_stat: bool = is_stat
        self.diagnostics: List[Diagnostic] = diagnostics

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.field!r}, is_stat={self.is_stat})")


def type_is_stat(type_token: str, stat_token: str) -> bool:
    '''
    True if `type_token` contains `stat_token`. Case-sensitive.
    '''
    return stat_token in type_token


def classify(type_name: str,
             field:     FieldShape,
             config:    Configuration,
             variant:   Optional[str] = None) -> FieldClass:
    '''
    Classify `field` of type `type_name` (and enum variant `variant`, if any).

    Diagnostics are collected in the result, not logged.
    '''
    stat_token = config.stat_type_token
    is_stat_type = type_is_stat(field.type_token, stat_token)
    include = field.has(STAT)
    exclude = field.has(STAT_IGNORE)

    found = []
    where = diagnostics.location(type_name, field.label, variant)

    if include and is_stat_type and config.redundant_stat_warning:
        found.append(diagnostics.redundant(type_name, where, stat_token))
    if include and exclude:
        found.append(diagnostics.conflict(type_name, where))

    is_stat = (is_stat_type or include) and not exclude
    return FieldClass(field, is_stat, found)
