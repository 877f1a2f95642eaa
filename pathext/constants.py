"""Constants used in other modules."""

import os

__all__ = [
  'EXTENSION_SEPARATOR',
  'PATH_SEPARATORS',
]


EXTENSION_SEPARATOR = '.'
PATH_SEPARATORS = tuple(separator for separator in (os.sep, os.altsep) if separator)
