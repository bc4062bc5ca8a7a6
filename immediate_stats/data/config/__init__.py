# coding: utf-8

'''
Immediate Stats configuration.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from .config import (EmptyPolicy, Configuration, default_path,
                     configuration, set_configuration, reset_configuration)


# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    'EmptyPolicy',
    'Configuration',
    'default_path',
    'configuration',
    'set_configuration',
    'reset_configuration',
]
