# coding: utf-8

'''
Builds a TypeShape from a live class.

  - `ctypes.Union` subclasses are UNIONs (and will be rejected).
  - StatEnum subclasses are ENUMs; their `variant()` declarations are the
    variants.
  - `enum.Enum` subclasses are ENUMs of payload-free variants.
  - NamedTuples are TUPLEs.
  - Dataclasses are STRUCTs of their `dataclasses.fields()`.
  - Anything else is a STRUCT of the class annotations, base classes first.

Markers come from `typing.Annotated`:

  health: Annotated[Stat, STAT_IGNORE]

String annotations (e.g. under `from __future__ import annotations`) are
resolved with `typing.get_type_hints()` in the class's module plus
`localns`, which `@stat_container` fills with the locals of the scope the
class was defined in.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import (Optional, Any, Mapping, Iterable,
                    List, Tuple, Dict, Annotated, ClassVar, Union)

import ctypes
import dataclasses
import enum
import inspect
import re
import types
import typing

from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError

from .const   import ShapeKind, Attribute
from .shape   import FieldShape, VariantShape, TypeShape
from .variant import StatEnum, variants_of


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

_MARKER_TEXT = re.compile(r'\bSTAT(_IGNORE)?\b')
'''
Finds a STAT or STAT_IGNORE marker in the text of an annotation.
'''

_OPTIONAL_TEXT = re.compile(r'^(typing\.)?(Optional|Union)\[|\|')
'''
Finds an `Optional[...]`, `Union[...]` or `X | Y` annotation in its text.
'''

_HINT = 'hint'


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

def reflect(klass: type,
            localns: Optional[Mapping[str, Any]] = None) -> TypeShape:
    '''
    Describe `klass`'s declaration for the generator.

    `localns` are extra names for resolving string annotations, e.g. the
    locals of the function `klass` was defined in.

    Raises DeriveError if an annotation carrying a STAT or STAT_IGNORE marker
    cannot be resolved.
    '''
    name = klass.__qualname__
    localns = _local_names(klass, localns)

    if issubclass(klass, ctypes.Union):
        return TypeShape(name, ShapeKind.UNION)

    if issubclass(klass, StatEnum):
        variants = []
        for variant_name, declaration, target in variants_of(klass):
            names = declaration.names or (None, ) * len(declaration.types)
            fields = _fields(klass, f"{name}.{variant_name}",
                             zip(names, declaration.types), localns)
            variants.append(VariantShape(variant_name, fields, target=target))
        return TypeShape(name, ShapeKind.ENUM, variants=variants)

    if issubclass(klass, enum.Enum):
        return TypeShape(name, ShapeKind.ENUM,
                         variants=[VariantShape(member.name)
                                   for member in klass])

    if issubclass(klass, tuple) and hasattr(klass, '_fields'):
        annotations = _annotations(klass)
        declared = [(None, annotations.get(each, ''))
                    for each in klass._fields]
        return TypeShape(name, ShapeKind.TUPLE,
                         fields=_fields(klass, name, declared, localns))

    if dataclasses.is_dataclass(klass):
        declared = [(each.name, each.type)
                    for each in dataclasses.fields(klass)]
        return TypeShape(name, ShapeKind.STRUCT,
                         fields=_fields(klass, name, declared, localns))

    declared = [(field_name, annotation)
                for field_name, annotation in _annotations(klass).items()
                if not _is_class_var(annotation)]
    return TypeShape(name, ShapeKind.STRUCT,
                     fields=_fields(klass, name, declared, localns))


def _local_names(klass: type,
                 localns: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    '''
    Names for resolving `klass`'s annotations besides its module's globals:
    `localns`, then the class body, then the class itself.
    '''
    names: Dict[str, Any] = dict(localns or {})
    names.update(vars(klass))
    names.setdefault(klass.__name__, klass)
    return names


# -----------------------------------------------------------------------------
# Fields
# -----------------------------------------------------------------------------

def _fields(klass: type,
            owner: str,
            declared: Iterable[Tuple[Optional[str], Any]],
            localns: Dict[str, Any]) -> List[FieldShape]:
    '''
    Make FieldShapes for (name, annotation) pairs, in order.

    `owner` is 'Type' or 'Type.Variant', for error messages.
    '''
    fields = []
    for index, (field_name, annotation) in enumerate(declared):
        label = index if field_name is None else field_name
        resolved = _resolve(klass, f"{owner}.{label}", annotation, localns)
        hint, attributes = _split_markers(resolved)
        fields.append(FieldShape(field_name, index,
                                 type_token(hint), attributes,
                                 optional=is_optional(hint)))
    return fields


def _annotations(klass: type) -> Dict[str, Any]:
    '''
    All annotations of `klass` and its bases, base classes first. Not
    evaluated.
    '''
    annotations: Dict[str, Any] = {}
    for base in reversed(klass.__mro__):
        if base is object:
            continue
        annotations.update(inspect.get_annotations(base))
    return annotations


def _resolve(klass: type,
             where: str,
             annotation: Any,
             localns: Dict[str, Any]) -> Any:
    '''
    Resolve a string annotation of field `where` with
    `typing.get_type_hints()`, keeping `Annotated` markers.

    An unresolvable annotation is returned as text, unless its text names a
    marker; then DeriveError is raised, since the marker would be lost.
    '''
    if isinstance(annotation, typing.ForwardRef):
        # NamedTuple keeps postponed annotations as ForwardRefs.
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str) or not annotation:
        return annotation

    # A class holding only this annotation.
    holder = type(klass.__name__, (),
                  {'__module__':      klass.__module__,
                   '__annotations__': {_HINT: annotation}})
    try:
        return typing.get_type_hints(holder,
                                     localns=localns,
                                     include_extras=True)[_HINT]
    except (NameError, AttributeError, SyntaxError, TypeError) as error:
        if _MARKER_TEXT.search(annotation):
            raise log.exception(
                DeriveError,
                "Could not resolve annotation {} of '{}', so its "
                "`STAT`/`STAT_IGNORE` marker cannot be honored. "
                "Define the type at module level or don't quote it. "
                "{}: {}",
                repr(annotation), where, type(error).__name__,
                error) from error

        log.debug("Could not resolve annotation {} of '{}'; using it as "
                  "text. {}: {}",
                  repr(annotation), where, type(error).__name__, error)
        return annotation


def _split_markers(hint: Any) -> Tuple[Any, Tuple[Attribute, ...]]:
    '''
    Returns (underlying type, STAT/STAT_IGNORE markers) for an annotation.
    '''
    if typing.get_origin(hint) is Annotated:
        underlying = typing.get_args(hint)[0]
        markers = tuple(each for each in hint.__metadata__
                        if isinstance(each, Attribute))
        return underlying, markers
    return hint, ()


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(('ClassVar', 'typing.ClassVar'))
    return (annotation is ClassVar
            or typing.get_origin(annotation) is ClassVar)


def is_optional(hint: Any) -> bool:
    '''
    True if `hint` is `Optional[...]` or another union of types, which may
    hold a value that has no `reset_modifiers`.
    '''
    if isinstance(hint, str):
        return bool(_OPTIONAL_TEXT.search(hint))
    return typing.get_origin(hint) in (Union, types.UnionType)


def type_token(hint: Any) -> str:
    '''
    Text of a type for the stat-type check: a class's qualname, a string
    annotation as-is, or `repr()` of anything else (e.g. `Optional[Stat]`).
    '''
    if isinstance(hint, str):
        return hint
    if isinstance(hint, type) and typing.get_origin(hint) is None:
        return hint.__qualname__
    return repr(hint)
