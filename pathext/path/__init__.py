"""Functions dealing with path components, file names and file extensions."""

from . import components
from . import fileext
from . import pathext
from . import pathlike

from .pathlike import *
from .fileext import *
from .components import *
from .pathext import *

__all__ = [
  *pathlike.__all__,
  *fileext.__all__,
  *components.__all__,
  *pathext.__all__,
]
