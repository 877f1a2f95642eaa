"""Library initialization."""

from . import constants
from . import path
from . import utils

from .path import *

__version__ = '0.1.0'

__all__ = [
  # Modules
  'constants',
  'path',
  'utils',
  # Global elements imported to or defined in this module
  'PathExt',
  'ends_with_extensions',
  'strip_extensions',
  'get_extension_chain',
  'has_component',
  'contains',
  'starts_or_ends_with',
]
