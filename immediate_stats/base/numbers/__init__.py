# coding: utf-8

'''
Helpers for numbers.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

# ------------------------------
# Types
# ------------------------------

from .const import (NumberTypes,
                    I32_MIN, I32_MAX, I64_MIN, I64_MAX, F32_MAX)
from .kinds import NumKind


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    # ------------------------------
    # Types & Consts
    # ------------------------------
    'NumberTypes',
    'I32_MIN',
    'I32_MAX',
    'I64_MIN',
    'I64_MAX',
    'F32_MAX',

    # ------------------------------
    # Kinds
    # ------------------------------
    'NumKind',
]
