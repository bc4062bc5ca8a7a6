# coding: utf-8

'''
Pretty printing for log context and exception data.
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import pprint
import textwrap


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

_WRAP_WIDTH = 70
'''
Strings are wrapped to this width. Other objects are left to pprint.
'''


wrapper = textwrap.TextWrapper(width=_WRAP_WIDTH,
                               tabsize=4,
                               replace_whitespace=False,
                               drop_whitespace=False)


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

def to_str(data, sort=True):
    '''
    `pprint` `data` to a string, dict keys sorted unless `sort` is False.
    '''
    return pprint.pformat(data, sort_dicts=sort)


def indented(obj, indent_amount=2, sort=True):
    '''
    Pretty string of `obj` with every line indented by `indent_amount`
    spaces.
    '''
    # pprint would quote a str; wrap it instead.
    text = wrapper.fill(obj) if isinstance(obj, str) else to_str(obj, sort)
    return textwrap.indent(text, ' ' * indent_amount, lambda line: True)
