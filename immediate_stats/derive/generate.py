# coding: utf-8

'''
Generates the source of `reset_modifiers` for a TypeShape.

For a struct:

  def reset_modifiers(self):
      self.health.reset_modifiers()
      self.speed.reset_modifiers()

For a tuple:

  def reset_modifiers(self):
      self[0].reset_modifiers()

For an enum, one dispatch on the variant's type with an arm per variant that
has stat fields, and a do-nothing fallback for everything else:

  def reset_modifiers(self):
      variant = type(self)
      if variant is _variant_0:
          self.stat.reset_modifiers()
      elif variant is _variant_1:
          self[0].reset_modifiers()
      else:
          pass

The source is compiled with `exec()`, the same way `dataclasses` builds its
generated methods.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import (Optional, Union, Any, Callable,
                    Dict, List, Tuple)

from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError
from immediate_stats.data.config     import (Configuration, EmptyPolicy,
                                             configuration)

from .const       import ShapeKind, RESET_METHOD
from .shape       import TypeShape, FieldShape
from .classify    import classify
from .diagnostics import Diagnostic
from .            import diagnostics


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

_INDENT = '    '

_VARIANT_NAME = '_variant_{index}'
'''
Name the live variant class is bound to in the generated function's globals.
'''


Arm = Tuple[Optional[str], Tuple[Union[str, int], ...]]
'''
(variant name or None for struct/tuple, labels of the fields it resets)
'''


# -----------------------------------------------------------------------------
# Result
# -----------------------------------------------------------------------------

class GeneratedReset:
    '''
    The generated `reset_modifiers` for one type.
    '''

    def _define_vars(self) -> None:
        self.type_name: str = ''
        self.kind: ShapeKind = None

        self.source: str = ''
        '''Python source of the `reset_modifiers` function.'''

        self.arms: Tuple[Arm, ...] = ()
        '''
        What gets reset, in order. Empty if the reset is a no-op.
        '''

        self.diagnostics: Tuple[Diagnostic, ...] = ()
        '''Non-fatal diagnostics found during generation. Not yet logged.'''

        self._namespace: Dict[str, Any] = {}
        '''Globals the source needs when compiled (variant classes).'''

    def __init__(self,
                 type_name:   str,
                 kind:        ShapeKind,
                 source:      str,
                 arms:        Tuple[Arm, ...],
                 diagnostics: Tuple[Diagnostic, ...],
                 namespace:   Dict[str, Any]) -> None:
        self._define_vars()
        self.type_name = type_name
        self.kind = kind
        self.source = source
        self.arms = arms
        self.diagnostics = diagnostics
        self._namespace = namespace

    @property
    def is_empty(self) -> bool:
        return not self.arms

    def compile(self, owner: Optional[type] = None) -> Callable[[Any], None]:
        '''
        Compile `source` and return the function.

        If `owner` is given, the function's `__qualname__` and `__module__`
        are set as if it had been written in `owner`'s class body.
        '''
        for name, target in self._namespace.items():
            if target is None:
                raise log.exception(
                    DeriveError,
                    "Cannot compile reset for '{}': no variant class bound "
                    "to '{}'.",
                    self.type_name, name)

        namespace = dict(self._namespace)
        local: Dict[str, Any] = {}
        exec(self.source, namespace, local)
        function = local[RESET_METHOD]

        if owner is not None:
            function.__qualname__ = f"{owner.__qualname__}.{RESET_METHOD}"
            function.__module__ = owner.__module__
        return function

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"{self.type_name!r}, {self.kind}, arms={self.arms!r})")


# -----------------------------------------------------------------------------
# Generation
# -----------------------------------------------------------------------------

def generate(shape: TypeShape,
             config: Optional[Configuration] = None) -> GeneratedReset:
    '''
    Generate `reset_modifiers` for `shape`.

    Uses the current `configuration()` if no `config` supplied.

    Raises DeriveError for unions, for optional stat fields, and for types
    with no stat fields if the config's empty-container policy is 'error'.
    '''
    config = config or configuration()

    if shape.kind is ShapeKind.UNION:
        raise log.exception(
            DeriveError,
            "'{}' is an untagged union. Unions are not supported by "
            "`@stat_container`.",
            shape.name)

    found: List[Diagnostic] = []
    namespace: Dict[str, Any] = {}

    if shape.kind is ShapeKind.ENUM:
        arms, body = _enum_body(shape, config, found, namespace)
    else:
        labels = _stat_fields(shape.name, shape.fields, config, found)
        arms = ((None, labels), ) if labels else ()
        body = [_reset_call(label) for label in labels]

    if not arms:
        body = ['pass']
        policy = config.empty_container
        if policy is EmptyPolicy.ERROR:
            raise log.exception(
                DeriveError,
                "'{}' has no stat fields to reset. Mark a field with `STAT` "
                "or remove `@stat_container`.",
                shape.name)
        if policy is EmptyPolicy.WARN:
            found.append(diagnostics.unused(shape.name))

    lines = [f"def {RESET_METHOD}(self):"]
    lines.extend(_INDENT + line for line in body)
    source = '\n'.join(lines) + '\n'

    return GeneratedReset(shape.name, shape.kind, source,
                          tuple(arms), tuple(found), namespace)


def _stat_fields(type_name: str,
                 fields:    Tuple[FieldShape, ...],
                 config:    Configuration,
                 found:     List[Diagnostic],
                 variant:   Optional[str] = None
                 ) -> Tuple[Union[str, int], ...]:
    '''
    Classify `fields`; returns labels of the stat ones, in declaration order.

    Raises DeriveError for an optional stat field: its reset would fail when
    the field holds None.
    '''
    labels = []
    for field in fields:
        result = classify(type_name, field, config, variant=variant)
        found.extend(result.diagnostics)
        if not result.is_stat:
            continue

        if field.optional:
            raise log.exception(
                DeriveError,
                "'{}' is optional (`{}`) and cannot be reset. Declare it "
                "without `Optional`/`Union` or mark it `STAT_IGNORE`.",
                diagnostics.location(type_name, field.label, variant),
                field.type_token)
        labels.append(field.label)
    return tuple(labels)


def _enum_body(shape:     TypeShape,
               config:    Configuration,
               found:     List[Diagnostic],
               namespace: Dict[str, Any]
               ) -> Tuple[List[Arm], List[str]]:
    arms = []
    body = ['variant = type(self)']

    for index, variant in enumerate(shape.variants):
        labels = _stat_fields(shape.name, variant.fields, config, found,
                              variant=variant.name)
        if not labels:
            continue

        name = _VARIANT_NAME.format(index=index)
        namespace[name] = variant.target

        keyword = 'if' if not arms else 'elif'
        body.append(f"{keyword} variant is {name}:")
        body.extend(_INDENT + _reset_call(label) for label in labels)
        arms.append((variant.name, labels))

    if not arms:
        return arms, []

    body.append('else:')
    body.append(_INDENT + 'pass')
    return arms, body


def _reset_call(label: Union[str, int]) -> str:
    if isinstance(label, int):
        return f"self[{label}].{RESET_METHOD}()"
    return f"self.{label}.{RESET_METHOD}()"
