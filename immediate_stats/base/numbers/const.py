# coding: utf-8

'''
Constants for dealing with numbers.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Union, NewType


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

# ------------------------------
# Number Types
# ------------------------------

NumberTypes = NewType('NumberTypes', Union[int, float])


# ------------------------------
# Fixed-Width Limits
# ------------------------------

I32_MIN = -(2 ** 31)
I32_MAX = (2 ** 31) - 1

I64_MIN = -(2 ** 63)
I64_MAX = (2 ** 63) - 1

F32_MAX = 3.4028234663852886e+38
'''Largest finite single precision float.'''
