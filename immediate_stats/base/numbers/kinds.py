# coding: utf-8

'''
Fixed-width numeric kinds for stats and modifiers.

Python has one unbounded `int` and one double precision `float`. Stats are
declared with a base/bonus kind and a multiplier kind, and every result is
`cast()` back into its kind so that e.g. a 32 bit integer stat behaves the
same no matter what Python is doing under the hood.

Conversion rules (pinned by the unit tests):
  - float -> integer kind: truncate toward zero, saturate at the kind's
    min/max, NaN becomes 0.
  - anything -> F32: round to nearest single precision value; values past
    the single precision range become a signed infinity.
  - anything -> F64: `float()`.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional

import enum
import math
import struct

from .const import (NumberTypes,
                    I32_MIN, I32_MAX, I64_MIN, I64_MAX)


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

@enum.unique
class NumKind(enum.Enum):
    '''
    The numeric kinds a Stat or Modifier can be built from.
    '''

    I32 = 'i32'
    '''32 bit signed integer.'''

    I64 = 'i64'
    '''64 bit signed integer.'''

    F32 = 'f32'
    '''Single precision float.'''

    F64 = 'f64'
    '''Double precision float.'''

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_integer(self) -> bool:
        return self in (NumKind.I32, NumKind.I64)

    @property
    def zero(self) -> NumberTypes:
        '''Additive identity of this kind.'''
        return 0 if self.is_integer else 0.0

    @property
    def one(self) -> NumberTypes:
        '''Multiplicative identity of this kind.'''
        return 1 if self.is_integer else 1.0

    @property
    def minimum(self) -> Optional[int]:
        '''Smallest value of integer kinds; None for float kinds.'''
        if self is NumKind.I32:
            return I32_MIN
        if self is NumKind.I64:
            return I64_MIN
        return None

    @property
    def maximum(self) -> Optional[int]:
        '''Largest value of integer kinds; None for float kinds.'''
        if self is NumKind.I32:
            return I32_MAX
        if self is NumKind.I64:
            return I64_MAX
        return None

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def cast(self, value: NumberTypes) -> NumberTypes:
        '''
        Convert `value` into this kind. See module docstr for the rules.
        '''
        if self.is_integer:
            return self._cast_int(value)
        if self is NumKind.F32:
            return _to_f32(value)
        return float(value)

    def _cast_int(self, value: NumberTypes) -> int:
        if isinstance(value, float):
            if math.isnan(value):
                return 0
            if math.isinf(value):
                return self.maximum if value > 0 else self.minimum
            # int() truncates toward zero.
            value = int(value)
        else:
            value = int(value)

        if value > self.maximum:
            return self.maximum
        if value < self.minimum:
            return self.minimum
        return value

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, lhs: NumberTypes, rhs: NumberTypes) -> NumberTypes:
        return self.cast(lhs + rhs)

    def sub(self, lhs: NumberTypes, rhs: NumberTypes) -> NumberTypes:
        return self.cast(lhs - rhs)

    def mul(self, lhs: NumberTypes, rhs: NumberTypes) -> NumberTypes:
        return self.cast(lhs * rhs)

    def div(self, lhs: NumberTypes, rhs: NumberTypes) -> NumberTypes:
        '''
        Float kinds follow IEEE-754: dividing by zero gives a signed infinity
        (or NaN for 0/0 and NaN/0) instead of raising.

        Integer kinds truncate toward zero and raise ZeroDivisionError for a
        zero divisor.
        '''
        if self.is_integer:
            lhs = self.cast(lhs)
            rhs = self.cast(rhs)
            quotient = abs(lhs) // abs(rhs)
            if (lhs < 0) != (rhs < 0):
                quotient = -quotient
            return self.cast(quotient)

        lhs = float(lhs)
        rhs = float(rhs)
        if rhs == 0.0:
            if lhs == 0.0 or math.isnan(lhs):
                return math.nan
            # Sign of zero matters: 1/-0 is -inf.
            sign = math.copysign(1.0, lhs) * math.copysign(1.0, rhs)
            return math.copysign(math.inf, sign)
        return self.cast(lhs / rhs)

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _to_f32(value: NumberTypes) -> float:
    '''
    Round `value` to single precision.
    '''
    value = float(value)
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        # Too big for a float32; that's infinity in float32-land.
        return math.copysign(math.inf, value)
