# coding: utf-8

'''
Contains a modifier that can be applied to a Stat.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Type, Dict, Tuple

from immediate_stats.base.numbers import NumKind, NumberTypes


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class Modifier:
    '''
    Modifier values that can be applied to a Stat with `Stat.apply()`.

    `bonus` is added to the stat's bonus, `multiplier` multiplies the stat's
    multiplier.
    '''

    BASE_KIND: NumKind = NumKind.I32
    '''Numeric kind of `bonus`. Matches the base kind of the Stat.'''

    MULTIPLIER_KIND: NumKind = NumKind.F32
    '''Numeric kind of `multiplier`.'''

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Set up our vars with type hinting, docstrs.
        '''
        self.bonus: NumberTypes = self.BASE_KIND.zero
        '''
        Added to the `base` of a Stat during calculation.

        Can be modified using `+=` and `-=`.
        '''

        self.multiplier: NumberTypes = self.MULTIPLIER_KIND.one
        '''
        Multiplies the `base` of a Stat during calculation.

        Can be modified using `*=` and `/=`.
        '''

    def __init__(self,
                 bonus:      Optional[NumberTypes] = None,
                 multiplier: Optional[NumberTypes] = None) -> None:
        '''
        Creates a new modifier from a bonus and a multiplier.
        '''
        self._define_vars()

        if bonus is not None:
            self.bonus = self.BASE_KIND.cast(bonus)
        if multiplier is not None:
            self.multiplier = self.MULTIPLIER_KIND.cast(multiplier)

    @classmethod
    def from_bonus(klass: Type['Modifier'],
                   bonus: NumberTypes) -> 'Modifier':
        '''
        Creates a new modifier from a bonus.
        '''
        return klass(bonus=bonus)

    @classmethod
    def from_multiplier(klass:      Type['Modifier'],
                        multiplier: NumberTypes) -> 'Modifier':
        '''
        Creates a new modifier from a multiplier.
        '''
        return klass(multiplier=multiplier)

    # -------------------------------------------------------------------------
    # Scaling
    # -------------------------------------------------------------------------

    def scaled(self, weight: float) -> 'Modifier':
        '''
        Returns a new modifier at `weight` effectiveness.

        The bonus scales linearly. The multiplier scales its deviation from
        one, so a x2.0 at 0.5 weight is x1.5.
        '''
        deviation = self.multiplier - self.MULTIPLIER_KIND.one
        return self.__class__(
            bonus=self.bonus * weight,
            multiplier=self.MULTIPLIER_KIND.one + deviation * weight)

    def copy(self) -> 'Modifier':
        return self.__class__(self.bonus, self.multiplier)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __iadd__(self, rhs: NumberTypes) -> 'Modifier':
        '''Adds to the modifier's bonus.'''
        self.bonus = self.BASE_KIND.add(self.bonus, rhs)
        return self

    def __isub__(self, rhs: NumberTypes) -> 'Modifier':
        '''Subtracts from the modifier's bonus.'''
        self.bonus = self.BASE_KIND.sub(self.bonus, rhs)
        return self

    def __imul__(self, rhs: NumberTypes) -> 'Modifier':
        '''Multiplies the modifier's multiplier.'''
        self.multiplier = self.MULTIPLIER_KIND.mul(self.multiplier, rhs)
        return self

    def __itruediv__(self, rhs: NumberTypes) -> 'Modifier':
        '''Divides the modifier's multiplier.'''
        self.multiplier = self.MULTIPLIER_KIND.div(self.multiplier, rhs)
        return self

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Modifier):
            return NotImplemented
        return (self.BASE_KIND is other.BASE_KIND
                and self.MULTIPLIER_KIND is other.MULTIPLIER_KIND
                and self.bonus == other.bonus
                and self.multiplier == other.multiplier)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"bonus={self.bonus!r}, "
                f"multiplier={self.multiplier!r})")


# -----------------------------------------------------------------------------
# Numeric Kind Variants
# -----------------------------------------------------------------------------

_MODIFIER_TYPES: Dict[Tuple[NumKind, NumKind], Type[Modifier]] = {}
'''
Modifier subclasses by (base kind, multiplier kind).
'''


def modifier_type(base_kind: NumKind,
                  multiplier_kind: NumKind) -> Type[Modifier]:
    '''
    Returns the Modifier class for this combination of numeric kinds, making
    (and caching) a new subclass if there isn't one yet.
    '''
    key = (base_kind, multiplier_kind)
    if key not in _MODIFIER_TYPES:
        name = f"Modifier_{base_kind}_{multiplier_kind}"
        _MODIFIER_TYPES[key] = type(name, (Modifier, ), {
            'BASE_KIND':       base_kind,
            'MULTIPLIER_KIND': multiplier_kind,
            '__module__':      __name__,
        })
    return _MODIFIER_TYPES[key]


class IModifier32(Modifier):
    BASE_KIND = NumKind.I32
    MULTIPLIER_KIND = NumKind.F32


class IModifier64(Modifier):
    BASE_KIND = NumKind.I64
    MULTIPLIER_KIND = NumKind.F64


class FModifier32(Modifier):
    BASE_KIND = NumKind.F32
    MULTIPLIER_KIND = NumKind.F32


class FModifier64(Modifier):
    BASE_KIND = NumKind.F64
    MULTIPLIER_KIND = NumKind.F64


IModifier = IModifier32
FModifier = FModifier32


_MODIFIER_TYPES.update({
    (NumKind.I32, NumKind.F32): IModifier32,
    (NumKind.I64, NumKind.F64): IModifier64,
    (NumKind.F32, NumKind.F32): FModifier32,
    (NumKind.F64, NumKind.F64): FModifier64,
})
