# coding: utf-8

'''
Structural description of a type, as seen by the `reset_modifiers` generator.

Built by `reflect` from live classes, or by hand in tests. Shapes are
immutable once made.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Union, Any, Iterable, Tuple, FrozenSet

from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError

from .const import ShapeKind, Attribute


# -----------------------------------------------------------------------------
# Fields
# -----------------------------------------------------------------------------

class FieldShape:
    '''
    One field of a struct, tuple, or enum variant.

    Named fields have a `name`; positional fields have `name` of None and are
    accessed by `index`.
    '''

    def _define_vars(self) -> None:
        self.name: Optional[str] = None
        '''Field name, or None for positional fields.'''

        self.index: int = 0
        '''Declaration order position, zero based.'''

        self.type_token: str = ''
        '''Textual form of the field's declared type.'''

        self.attributes: FrozenSet[Attribute] = frozenset()
        '''STAT / STAT_IGNORE markers on the field.'''

        self.optional: bool = False
        '''
        Declared `Optional[...]` or another union of types, so it may hold
        None or something else with no `reset_modifiers`.
        '''

    def __init__(self,
                 name:       Optional[str],
                 index:      int,
                 type_token: str,
                 attributes: Iterable[Attribute] = (),
                 optional:   bool                = False) -> None:
        self._define_vars()
        self.name = name
        self.index = index
        self.type_token = type_token
        self.attributes = frozenset(attributes)
        self.optional = optional

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @property
    def label(self) -> Union[str, int]:
        '''
        Name for named fields, index for positional ones.
        '''
        return self.name if self.is_named else self.index

    def has(self, attribute: Attribute) -> bool:
        return attribute in self.attributes

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldShape):
            return NotImplemented
        return (self.name == other.name
                and self.index == other.index
                and self.type_token == other.type_token
                and self.attributes == other.attributes
                and self.optional == other.optional)

    def __hash__(self) -> int:
        return hash((self.name, self.index, self.type_token,
                     self.attributes, self.optional))

    def __repr__(self) -> str:
        attrs = sorted(str(each) for each in self.attributes)
        return (f"{self.__class__.__name__}("
                f"{self.label!r}: {self.type_token}"
                f"{'?' if self.optional else ''}"
                f"{', ' + ', '.join(attrs) if attrs else ''})")


def _validate_fields(owner: str,
                     fields: Tuple[FieldShape, ...]) -> None:
    '''
    A field list is all named or all positional. Raises DeriveError if not.
    '''
    named = [each.is_named for each in fields]
    if any(named) and not all(named):
        raise log.exception(
            DeriveError,
            "'{}' mixes named and positional fields: {}",
            owner, [each.label for each in fields])


# -----------------------------------------------------------------------------
# Variants
# -----------------------------------------------------------------------------

class VariantShape:
    '''
    One variant of an enum: a name and zero or more fields.

    `target` is the live variant class, if there is one. The generated enum
    reset compares `type(self)` against it.
    '''

    def __init__(self,
                 name:   str,
                 fields: Iterable[FieldShape] = (),
                 target: Optional[type]       = None) -> None:
        self.name: str = name
        self.fields: Tuple[FieldShape, ...] = tuple(fields)
        self.target: Optional[type] = target

        _validate_fields(name, self.fields)

    @property
    def is_unit(self) -> bool:
        '''No payload at all.'''
        return not self.fields

    @property
    def is_named(self) -> bool:
        return bool(self.fields) and self.fields[0].is_named

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.name!r}, {list(self.fields)!r})")


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

class TypeShape:
    '''
    A whole declaration: its name, kind, and fields (struct/tuple) or
    variants (enum).
    '''

    def __init__(self,
                 name:     str,
                 kind:     ShapeKind,
                 fields:   Iterable[FieldShape]   = (),
                 variants: Iterable[VariantShape] = ()) -> None:
        self.name: str = name
        self.kind: ShapeKind = kind
        self.fields: Tuple[FieldShape, ...] = tuple(fields)
        self.variants: Tuple[VariantShape, ...] = tuple(variants)

        _validate_fields(name, self.fields)

        if kind is ShapeKind.STRUCT and any(not f.is_named
                                            for f in self.fields):
            raise log.exception(
                DeriveError,
                "Struct '{}' has positional fields; use ShapeKind.TUPLE.",
                name)
        if kind is ShapeKind.TUPLE and any(f.is_named for f in self.fields):
            raise log.exception(
                DeriveError,
                "Tuple '{}' has named fields; use ShapeKind.STRUCT.",
                name)

    def __repr__(self) -> str:
        members = self.variants if self.kind is ShapeKind.ENUM else self.fields
        return (f"{self.__class__.__name__}("
                f"{self.name!r}, {self.kind}, {list(members)!r})")
