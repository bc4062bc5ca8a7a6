# coding: utf-8

'''
Tagged unions ("stat enums") for `@stat_container`.

Declare variants in the class body with `variant()`:

  @stat_container
  class Status(StatEnum):
      Buffed   = variant(speed=Stat, note=str)       # named fields
      Poisoned = variant(Stat, int)                  # positional fields
      Normal   = variant()                           # no payload

Each declaration becomes a subclass of the enum, so:

  status = Status.Buffed(speed=Stat(10), note='haste')
  status = Status.Poisoned(Stat(5), 3)
  status = Status.Normal()

  isinstance(status, Status)   -> True
  type(status) is Status.Normal
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Any, Type, Iterator, List, Tuple


# -----------------------------------------------------------------------------
# Declaration
# -----------------------------------------------------------------------------

class VariantDeclaration:
    '''
    Placeholder left in a StatEnum class body by `variant()`. Replaced with
    the real variant class when the enum class is created.
    '''

    def __init__(self,
                 names: Optional[Tuple[str, ...]],
                 types: Tuple[Any, ...]) -> None:
        self.names: Optional[Tuple[str, ...]] = names
        '''Field names; None for positional fields.'''

        self.types: Tuple[Any, ...] = types
        '''Declared field types (classes, typing constructs, or strings).'''

    def __repr__(self) -> str:
        if self.names is None:
            return f"variant{self.types!r}"
        fields = ', '.join(f"{name}={kind!r}"
                           for name, kind in zip(self.names, self.types))
        return f"variant({fields})"


def variant(*positional: Any, **named: Any) -> VariantDeclaration:
    '''
    Declare a StatEnum variant with positional fields, named fields, or no
    fields. Can't have both positional and named.
    '''
    if positional and named:
        raise TypeError("A variant's fields are either all positional or "
                        "all named; got both. "
                        f"positional: {positional}, named: {named}")
    if named:
        return VariantDeclaration(tuple(named.keys()), tuple(named.values()))
    return VariantDeclaration(None, tuple(positional))


# -----------------------------------------------------------------------------
# Enum Base Class
# -----------------------------------------------------------------------------

class StatEnum:
    '''
    Base class for tagged unions. See module docstr.

    Instances are always one of the declared variants; the enum class itself
    can't be instantiated.
    '''

    __variants__: Tuple[Type['StatEnum'], ...] = ()
    '''
    The enum's variant classes, in declaration order.
    '''

    _enum_: Optional[Type['StatEnum']] = None
    '''
    For variant classes: the enum they belong to. None on enum classes.
    '''

    _field_names_: Optional[Tuple[str, ...]] = None
    _field_types_: Tuple[Any, ...] = ()

    def __init_subclass__(klass: Type['StatEnum'], **kwargs: Any) -> None:
        '''
        Turn `variant()` declarations into variant subclasses.
        '''
        super().__init_subclass__(**kwargs)

        # Variant classes are made below; nothing to do for them.
        if '_enum_' in klass.__dict__:
            return

        variants = []
        for name, value in list(vars(klass).items()):
            if not isinstance(value, VariantDeclaration):
                continue
            made = _make_variant(klass, name, value)
            setattr(klass, name, made)
            variants.append(made)
        klass.__variants__ = tuple(variants)

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def __new__(klass: Type['StatEnum'], *args: Any, **kwargs: Any):
        if '_enum_' not in klass.__dict__:
            names = [each.__name__ for each in klass.__variants__]
            raise TypeError(f"Cannot instantiate enum '{klass.__qualname__}' "
                            f"directly; use one of its variants: {names}")
        return super().__new__(klass)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        names = self._field_names_
        count = len(self._field_types_)
        qualname = type(self).__qualname__

        if names is None:
            if kwargs:
                raise TypeError(f"{qualname}() has positional fields only; "
                                f"got keyword args: {list(kwargs)}")
            if len(args) != count:
                raise TypeError(f"{qualname}() takes {count} field(s); "
                                f"got {len(args)}")
            values = list(args)

        else:
            if len(args) > count:
                raise TypeError(f"{qualname}() takes {count} field(s); "
                                f"got {len(args)} positional")
            bound = dict(zip(names, args))
            for key, value in kwargs.items():
                if key not in names:
                    raise TypeError(f"{qualname}() has no field '{key}'")
                if key in bound:
                    raise TypeError(f"{qualname}() got multiple values "
                                    f"for field '{key}'")
                bound[key] = value
            missing = [each for each in names if each not in bound]
            if missing:
                raise TypeError(f"{qualname}() missing field(s): {missing}")
            values = [bound[each] for each in names]

        object.__setattr__(self, '_values_', values)

    # -------------------------------------------------------------------------
    # Field Access
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails.
        names = type(self)._field_names_
        if not name.startswith('_') and names and name in names:
            return self._values_[names.index(name)]
        raise AttributeError(f"'{type(self).__qualname__}' has no "
                             f"attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        names = type(self)._field_names_
        if names and name in names:
            self._values_[names.index(name)] = value
            return
        super().__setattr__(name, value)

    def __getitem__(self, index: int) -> Any:
        return self._values_[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values_[index] = value

    def __len__(self) -> int:
        return len(self._values_)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values_)

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StatEnum):
            return NotImplemented
        return type(self) is type(other) and self._values_ == other._values_

    __hash__ = None

    def __repr__(self) -> str:
        names = self._field_names_
        if names is None:
            fields = ', '.join(repr(each) for each in self._values_)
        else:
            fields = ', '.join(f"{name}={value!r}"
                               for name, value in zip(names, self._values_))
        return f"{type(self).__qualname__}({fields})"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _make_variant(enum_class:  Type[StatEnum],
                  name:        str,
                  declaration: VariantDeclaration) -> Type[StatEnum]:
    '''
    Create the variant subclass of `enum_class` for `declaration`.
    '''
    return type(name, (enum_class, ), {
        '_enum_':        enum_class,
        '_field_names_': declaration.names,
        '_field_types_': declaration.types,
        '__qualname__':  f"{enum_class.__qualname__}.{name}",
        '__module__':    enum_class.__module__,
        '__variants__':  (),
    })


def variants_of(enum_class: Type[StatEnum]
                ) -> List[Tuple[str, VariantDeclaration, Type[StatEnum]]]:
    '''
    Returns (name, declaration, variant class) for each of the enum's
    variants, in declaration order.
    '''
    return [(each.__name__,
             VariantDeclaration(each._field_names_, each._field_types_),
             each)
            for each in enum_class.__variants__]
