# coding: utf-8

'''
The StatContainer capability: anything that can reset its stat modifiers.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Type

from abc import ABC, abstractmethod


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

class StatContainer(ABC):
    '''
    Types that contain stats that need to be reset.

    It is recommended to use the `@stat_container` class decorator instead of
    implementing this manually. Hand-written classes do not need to inherit
    from this; having a callable `reset_modifiers` is enough for
    `isinstance(obj, StatContainer)` to be True.
    '''

    @abstractmethod
    def reset_modifiers(self) -> None:
        '''
        Resets all stat bonuses to zero, and stat multipliers to one.
        '''
        ...

    @classmethod
    def __subclasshook__(klass: Type['StatContainer'],
                         subclass: Type) -> bool:
        if klass is not StatContainer:
            return NotImplemented

        for each in subclass.__mro__:
            if 'reset_modifiers' in each.__dict__:
                return callable(each.__dict__['reset_modifiers'])
        return NotImplemented
