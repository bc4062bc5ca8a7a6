# coding: utf-8

'''
The `@stat_container` class decorator.

Generates and attaches a `reset_modifiers()` that resets every stat field of
the class, then registers the class as a StatContainer:

  @stat_container
  @dataclasses.dataclass
  class Speed:
      value: Stat

  @stat_container(component=plugin)
  class Movement:
      speed: Stat
      jump:  Annotated[Stat, STAT_IGNORE]
      boots: Annotated[Boots, STAT]
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Union, Any, Iterable, Dict, Type, Callable

import inspect

from immediate_stats.logger          import log
from immediate_stats.base.exceptions import DeriveError
from immediate_stats.data.config     import Configuration
from immediate_stats.stat.container  import StatContainer

from .const    import RESET_METHOD, GENERATED_ATTR
from .reflect  import reflect
from .generate import GeneratedReset, generate
from .         import diagnostics


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

_MARK_GENERATED = '__stat_generated__'
'''
Set to True on generated functions so re-decorating doesn't mistake our own
`reset_modifiers` for a hand-written one.
'''

_CACHE: Dict[type, GeneratedReset] = {}
'''
Generated resets by class. Generation happens once per class.
'''


# -----------------------------------------------------------------------------
# Decorator
# -----------------------------------------------------------------------------

def stat_container(klass:     Optional[type]          = None,
                   *,
                   component: Optional[Any]           = None,
                   resource:  Optional[Any]           = None,
                   config:    Optional[Configuration] = None
                   ) -> Union[type, Callable[[type], type]]:
    '''
    Class decorator. Use bare or with arguments:

      @stat_container
      @stat_container(component=auto_plugin)

    `component` / `resource`: an AutoPlugin, or iterable of them, to register
    this class with for automatic reset scheduling.

    `config`: Configuration to generate with instead of the current one.

    Raises DeriveError if the class can't be a stat container.
    '''
    def decorate(klass: type) -> type:
        return _decorate(klass, component, resource, config,
                         _caller_locals())

    if klass is None:
        return decorate
    return _decorate(klass, component, resource, config, _caller_locals())


def _decorate(klass:     type,
              component: Optional[Any],
              resource:  Optional[Any],
              config:    Optional[Configuration],
              localns:   Dict[str, Any]) -> type:
    if not isinstance(klass, type):
        raise log.exception(
            DeriveError,
            "@stat_container can only decorate classes. Got: {}",
            klass)

    existing = klass.__dict__.get(RESET_METHOD, None)
    if existing is not None and not getattr(existing, _MARK_GENERATED, False):
        raise log.exception(
            DeriveError,
            "'{}' already defines `{}`. Remove it or remove "
            "@stat_container.",
            klass.__qualname__, RESET_METHOD)

    result = _CACHE.get(klass, None)
    if result is None:
        result = generate(reflect(klass, localns), config)
        diagnostics.emit(result.diagnostics)
        _CACHE[klass] = result
        log.debug("Generated {}.{}:\n{}",
                  klass.__qualname__, RESET_METHOD, result.source)

    function = result.compile(owner=klass)
    setattr(function, _MARK_GENERATED, True)
    setattr(klass, RESET_METHOD, function)
    setattr(klass, GENERATED_ATTR, result)
    StatContainer.register(klass)

    for plugin in _plugins(component):
        plugin.add_component(klass)
    for plugin in _plugins(resource):
        plugin.add_resource(klass)

    return klass


def _caller_locals() -> Dict[str, Any]:
    '''
    Locals of the scope that applied the decorator: two frames up from here.
    Classes defined inside functions need them to resolve string
    annotations.
    '''
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame else None
        return dict(caller.f_locals) if caller else {}
    finally:
        del frame


def _plugins(plugins: Optional[Any]) -> Iterable[Any]:
    '''
    None, one AutoPlugin, or an iterable of them -> iterable of them.
    '''
    if plugins is None:
        return ()
    if hasattr(plugins, 'add_component'):
        return (plugins, )
    return plugins


# -----------------------------------------------------------------------------
# Cache
# -----------------------------------------------------------------------------

def generated(klass: Type[Any]) -> Optional[GeneratedReset]:
    '''
    Returns the GeneratedReset for a decorated class, or None.
    '''
    return _CACHE.get(klass, None)


def clear_cache() -> None:
    '''
    Forget all generated resets. Already decorated classes keep theirs.
    '''
    _CACHE.clear()
