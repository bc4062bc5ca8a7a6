# coding: utf-8

'''
All your Exceptions are belong to these classes.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Union, Any, Type, Dict

from immediate_stats.logger import pretty


# -----------------------------------------------------------------------------
# Helper
# -----------------------------------------------------------------------------

def is_immediate_stats(error_or_type: Union[Exception, Type[Exception]]
                       ) -> bool:
    '''
    Given `error_or_type`, this will return True if it is an
    ImmediateStatsError or sub-class, and False otherwise.

    `error_or_type` can be either an instance or a class type.
    '''
    # ---
    # Need to get the real actual type.
    # ---
    type_of_error = (type(error_or_type)
                     if isinstance(error_or_type, Exception) else
                     error_or_type)

    # ---
    # Now we can check for the relation to our base exception class.
    # ---
    return issubclass(type_of_error, ImmediateStatsError)


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

class ImmediateStatsError(Exception):
    def __init__(self,
                 message:    str,
                 cause:      Optional[Exception]       = None,
                 **data:     Optional[Dict[Any, Any]]) -> None:
        '''Extra data included.'''
        super().__init__(message)

        self.message    = message
        '''Human-friendly error message.'''

        self.cause      = cause
        '''
        (Optional) Python/Third-Party exception that caused us to raise
        this exception.
        '''

        self.data       = data
        '''
        A bucket to stuff any extra data about the error.
        '''

    def __str__(self):
        output = f"{self.message}"
        if self.cause:
            output += f" from {self.cause}"
        if self.data:
            output += "\nAdditional Error Data:\n"
            output += pretty.indented(self.data)

        return output


class DeriveError(ImmediateStatsError):
    '''
    Generating `reset_modifiers` for a type failed. The type cannot be used as
    a StatContainer until its declaration is fixed.
    '''
    ...


class ConfigError(ImmediateStatsError):
    '''
    Configuration document could not be loaded or has invalid values.
    '''
    ...
