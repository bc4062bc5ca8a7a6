# coding: utf-8

'''
`@stat_container`: generates `reset_modifiers()` for types holding stats.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .const       import (ShapeKind, Attribute, DiagnosticCode,
                          STAT, STAT_IGNORE, RESET_METHOD)
from .shape       import FieldShape, VariantShape, TypeShape
from .variant     import StatEnum, variant
from .classify    import FieldClass, classify, type_is_stat
from .diagnostics import Diagnostic
from .generate    import GeneratedReset, generate
from .reflect     import reflect
from .derive      import stat_container, generated, clear_cache


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Markers & Enums
    # ------------------------------
    'STAT',
    'STAT_IGNORE',
    'Attribute',
    'ShapeKind',
    'DiagnosticCode',
    'RESET_METHOD',

    # ------------------------------
    # Shapes
    # ------------------------------
    'FieldShape',
    'VariantShape',
    'TypeShape',
    'reflect',

    # ------------------------------
    # Tagged Unions
    # ------------------------------
    'StatEnum',
    'variant',

    # ------------------------------
    # Generation
    # ------------------------------
    'FieldClass',
    'classify',
    'type_is_stat',
    'Diagnostic',
    'GeneratedReset',
    'generate',

    # ------------------------------
    # Decorator
    # ------------------------------
    'stat_container',
    'generated',
    'clear_cache',
]
