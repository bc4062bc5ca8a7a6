# coding: utf-8

'''
The Stat: a base value plus a temporary bonus and multiplier.

Bonus and multiplier are meant to be rebuilt every tick: reset them with
`reset_modifiers()`, then re-apply whatever buffs/debuffs are still active.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Type, Dict, Tuple

from immediate_stats.base.numbers import NumKind, NumberTypes

from .container import StatContainer
from .modifier import Modifier


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class Stat(StatContainer):
    '''
    A stat that can be modified by bonuses and multipliers.

    Integer stat by default (i32 base, f32 multiplier). Use one of the aliases
    (`FStat32`, `IStat64`, ...) or `stat_type()` for other numeric kinds.
    '''

    BASE_KIND: NumKind = NumKind.I32
    '''Numeric kind of `base`, `bonus`, and `total()`.'''

    MULTIPLIER_KIND: NumKind = NumKind.F32
    '''Numeric kind of `multiplier`.'''

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Set up our vars with type hinting, docstrs.
        '''
        self.base: NumberTypes = self.BASE_KIND.zero
        '''
        The persistent value of the stat. Never touched by resets.
        '''

        self.bonus: NumberTypes = self.BASE_KIND.zero
        '''
        Temporary addition to `base`. Reset to zero by `reset_modifiers()`.
        '''

        self.multiplier: NumberTypes = self.MULTIPLIER_KIND.one
        '''
        Temporary scale applied after `bonus`. Reset to one by
        `reset_modifiers()`.
        '''

    def __init__(self,
                 base:       Optional[NumberTypes] = None,
                 bonus:      Optional[NumberTypes] = None,
                 multiplier: Optional[NumberTypes] = None) -> None:
        '''
        Creates a stat from a base value. Bonus and multiplier default to
        their identities.
        '''
        self._define_vars()

        if base is not None:
            self.base = self.BASE_KIND.cast(base)
        if bonus is not None:
            self.bonus = self.BASE_KIND.cast(bonus)
        if multiplier is not None:
            self.multiplier = self.MULTIPLIER_KIND.cast(multiplier)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_bonus(self, bonus: NumberTypes) -> 'Stat':
        '''
        Returns a copy of this stat with `bonus` replaced.
        '''
        result = self.copy()
        result.bonus = self.BASE_KIND.cast(bonus)
        return result

    def with_multiplier(self, multiplier: NumberTypes) -> 'Stat':
        '''
        Returns a copy of this stat with `multiplier` replaced.
        '''
        result = self.copy()
        result.multiplier = self.MULTIPLIER_KIND.cast(multiplier)
        return result

    def with_modifier(self, modifier: Modifier) -> 'Stat':
        '''
        Returns a copy of this stat with both bonus and multiplier replaced by
        the modifier's.
        '''
        result = self.copy()
        result.bonus = self.BASE_KIND.cast(modifier.bonus)
        result.multiplier = self.MULTIPLIER_KIND.cast(modifier.multiplier)
        return result

    def copy(self) -> 'Stat':
        return self.__class__(self.base, self.bonus, self.multiplier)

    # -------------------------------------------------------------------------
    # Calculation & Modification
    # -------------------------------------------------------------------------

    def total(self) -> NumberTypes:
        '''
        Calculates the total value of the stat:
          (base + bonus) * multiplier

        The sum is converted to the multiplier's kind for the multiplication
        and the product is converted back to the base kind. For integer
        stats that means the result is truncated toward zero.
        '''
        summed = self.MULTIPLIER_KIND.cast(self.base + self.bonus)
        return self.BASE_KIND.cast(summed * self.multiplier)

    def apply(self, modifier: Modifier) -> None:
        '''
        Adds the modifier's bonus and multiplies by the modifier's multiplier.
        '''
        self.bonus = self.BASE_KIND.add(self.bonus, modifier.bonus)
        self.multiplier = self.MULTIPLIER_KIND.mul(self.multiplier,
                                                   modifier.multiplier)

    def apply_scaled(self, modifier: Modifier, weight: float) -> None:
        '''
        Applies `modifier` at `weight` effectiveness.

        Bonus contribution is `bonus * weight`. The multiplier is scaled
        around one, so applying x2.0 at 0.5 weight multiplies by 1.5.
        '''
        deviation = modifier.multiplier - self.MULTIPLIER_KIND.one
        self.bonus = self.BASE_KIND.add(
            self.bonus,
            self.BASE_KIND.cast(modifier.bonus * weight))
        self.multiplier = self.MULTIPLIER_KIND.mul(
            self.multiplier,
            self.MULTIPLIER_KIND.cast(self.MULTIPLIER_KIND.one
                                      + deviation * weight))

    def reset_modifiers(self) -> None:
        '''
        Sets bonus to zero and multiplier to one. `base` is left alone.
        '''
        self.bonus = self.BASE_KIND.zero
        self.multiplier = self.MULTIPLIER_KIND.one

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __iadd__(self, rhs: NumberTypes) -> 'Stat':
        '''Adds to the stat's bonus.'''
        self.bonus = self.BASE_KIND.add(self.bonus, rhs)
        return self

    def __isub__(self, rhs: NumberTypes) -> 'Stat':
        '''Subtracts from the stat's bonus.'''
        self.bonus = self.BASE_KIND.sub(self.bonus, rhs)
        return self

    def __imul__(self, rhs: NumberTypes) -> 'Stat':
        '''Multiplies the stat's multiplier.'''
        self.multiplier = self.MULTIPLIER_KIND.mul(self.multiplier, rhs)
        return self

    def __itruediv__(self, rhs: NumberTypes) -> 'Stat':
        '''
        Divides the stat's multiplier. Float multipliers become inf/NaN when
        divided by zero.
        '''
        self.multiplier = self.MULTIPLIER_KIND.div(self.multiplier, rhs)
        return self

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Stat):
            return NotImplemented
        return (self.BASE_KIND is other.BASE_KIND
                and self.MULTIPLIER_KIND is other.MULTIPLIER_KIND
                and self.base == other.base
                and self.bonus == other.bonus
                and self.multiplier == other.multiplier)

    # Mutable; no hashing.
    __hash__ = None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"base={self.base!r}, "
                f"bonus={self.bonus!r}, "
                f"multiplier={self.multiplier!r})")


# -----------------------------------------------------------------------------
# Numeric Kind Variants
# -----------------------------------------------------------------------------

class IStat32(Stat):
    '''Integer stat: i32 base, f32 multiplier.'''
    BASE_KIND = NumKind.I32
    MULTIPLIER_KIND = NumKind.F32


class IStat64(Stat):
    '''Integer stat: i64 base, f64 multiplier.'''
    BASE_KIND = NumKind.I64
    MULTIPLIER_KIND = NumKind.F64


class FStat32(Stat):
    '''Float stat: f32 base, f32 multiplier.'''
    BASE_KIND = NumKind.F32
    MULTIPLIER_KIND = NumKind.F32


class FStat64(Stat):
    '''Float stat: f64 base, f64 multiplier.'''
    BASE_KIND = NumKind.F64
    MULTIPLIER_KIND = NumKind.F64


IStat = IStat32
FStat = FStat32


_STAT_TYPES: Dict[Tuple[NumKind, NumKind], Type[Stat]] = {
    (NumKind.I32, NumKind.F32): IStat32,
    (NumKind.I64, NumKind.F64): IStat64,
    (NumKind.F32, NumKind.F32): FStat32,
    (NumKind.F64, NumKind.F64): FStat64,
}
'''
Stat subclasses by (base kind, multiplier kind).
'''


def stat_type(base_kind: NumKind,
              multiplier_kind: NumKind) -> Type[Stat]:
    '''
    Returns the Stat class for this combination of numeric kinds, making (and
    caching) a new subclass if there isn't one yet.

    Generated class names contain "Stat" so the derive's textual stat-type
    check still recognizes them.
    '''
    key = (base_kind, multiplier_kind)
    if key not in _STAT_TYPES:
        name = f"Stat_{base_kind}_{multiplier_kind}"
        _STAT_TYPES[key] = type(name, (Stat, ), {
            'BASE_KIND':       base_kind,
            'MULTIPLIER_KIND': multiplier_kind,
            '__module__':      __name__,
        })
    return _STAT_TYPES[key]
