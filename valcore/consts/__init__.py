"""Assorted common constants"""

__all__ = [
    'UnsetValue',
    'EMBEDDED_LANGUAGE',
    'PYTHON_LANGUAGE',
    'CHECK_DIGIT_INDEX_UNSET',
    'END_INDEX_UNBOUNDED',
]

import sys

from datasalad.settings import UnsetValue

EMBEDDED_LANGUAGE = 'unified-el'
"""Reserved language identifier selecting the embedded expression interpreter
"""
PYTHON_LANGUAGE = 'python'
"""Language identifier of the restricted Python expression engine"""

CHECK_DIGIT_INDEX_UNSET = -1
"""Check digit index value meaning "last character of the checked window"
"""
END_INDEX_UNBOUNDED = sys.maxsize
"""Default exclusive end index, effectively the end of any input"""
