# coding: utf-8

'''
Generation-time diagnostics: non-fatal notes about a `@stat_container`
declaration, logged once when its `reset_modifiers` is generated.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Iterable

from immediate_stats.logger import log

from .const import DiagnosticCode


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class Diagnostic:
    '''
    One diagnostic about one type (and maybe one field of it).
    '''

    def __init__(self,
                 code:      DiagnosticCode,
                 type_name: str,
                 location:  str,
                 message:   str,
                 level:     log.Level = log.Level.WARNING) -> None:
        self.code: DiagnosticCode = code
        self.level: log.Level = level
        self.type_name: str = type_name

        self.location: str = location
        '''
        Dotted location: 'Type', 'Type.field', or 'Type.Variant.field'.
        '''

        self.message: str = message

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (self.code == other.code
                and self.level == other.level
                and self.location == other.location
                and self.message == other.message)

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.code}, {self.location!r}, {self.message!r})")


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------

def location(type_name: str,
             field_label: Optional[Any] = None,
             variant: Optional[str] = None) -> str:
    parts = [type_name]
    if variant is not None:
        parts.append(variant)
    if field_label is not None:
        parts.append(str(field_label))
    return '.'.join(parts)


def conflict(type_name: str, where: str) -> Diagnostic:
    return Diagnostic(DiagnosticCode.CONFLICT, type_name, where,
                      "`STAT` marker is overruled by `STAT_IGNORE` marker.")


def redundant(type_name: str, where: str, stat_token: str) -> Diagnostic:
    return Diagnostic(DiagnosticCode.REDUNDANT, type_name, where,
                      "Unnecessary `STAT` marker. Fields of type "
                      f"`{stat_token}` are automatically included.")


def unused(type_name: str) -> Diagnostic:
    return Diagnostic(DiagnosticCode.UNUSED, type_name, type_name,
                      "Unused `@stat_container`. Consider marking a field "
                      "that implements `StatContainer` with `STAT`.")


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------

def emit(diagnostics: Iterable[Diagnostic]) -> None:
    '''
    Log each diagnostic at its level.
    '''
    for each in diagnostics:
        log.at_level(each.level,
                     "{}: {}",
                     each.location, each.message)
