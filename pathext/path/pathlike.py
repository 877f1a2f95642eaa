"""Conversion of path-like values and views derived from the final path
segment.
"""

import os
import pathlib
from typing import List, Optional, Tuple, Union

from .. import constants as pgconstants

__all__ = [
  'PathLike',
  'to_path_str',
  'get_components',
  'get_final_segment',
  'split_name',
  'get_name_parts',
]


PathLike = Union[str, bytes, os.PathLike]
"""Any value accepted by `os.fsdecode()`."""

_NO_FINAL_SEGMENT_NAMES = {'', os.curdir, os.pardir}


def to_path_str(path: PathLike) -> str:
  """Returns the textual form of the specified path-like value.

  ``bytes`` (including ``os.PathLike`` objects returning ``bytes``) are
  decoded using the filesystem encoding. Values that are not path-like raise
  `TypeError`.
  """
  return os.fsdecode(path)


def get_components(path: PathLike) -> Tuple[str, ...]:
  """Returns the components of ``path`` as split by `pathlib.PurePath`.

  The root (e.g. ``'/'`` or ``'C:\\'``) is the first component of an absolute
  path. An empty path has no components.

  ``'..'`` components are preserved, while ``'.'`` components are dropped by
  `pathlib.PurePath`, including a leading one, e.g. ``'./a'`` only has the
  component ``'a'``.
  """
  return pathlib.PurePath(to_path_str(path)).parts


def get_final_segment(path: PathLike) -> Optional[str]:
  """Returns the last component of ``path`` (usually the filename), or
  ``None`` if there is none.

  There is no final segment if ``path`` is empty, ends with a path separator
  (which includes the root directory) or ends with ``'.'`` or ``'..'``.
  """
  path_str = to_path_str(path)

  if not path_str or path_str.endswith(pgconstants.PATH_SEPARATORS):
    return None

  name = pathlib.PurePath(path_str).name

  if name in _NO_FINAL_SEGMENT_NAMES:
    return None

  return name


def split_name(name: str) -> Tuple[str, List[str]]:
  """Splits a filename into the base name and the list of extensions.

  A leading period denotes a hidden file rather than the start of a file
  extension, hence it remains part of the base name:

    >>> split_name('archive.tar.gz')
    ('archive', ['tar', 'gz'])
    >>> split_name('.config.json')
    ('.config', ['json'])
    >>> split_name('.gitignore')
    ('.gitignore', [])

  Empty extensions (consecutive or trailing periods) are preserved, e.g.
  ``'a.b.'`` results in ``('a', ['b', ''])``.
  """
  separator = pgconstants.EXTENSION_SEPARATOR

  if name.startswith(separator):
    head, *extensions = name[len(separator):].split(separator)
    return f'{separator}{head}', extensions
  else:
    head, *extensions = name.split(separator)
    return head, extensions


def get_name_parts(path: PathLike) -> List[str]:
  """Returns the base name followed by the extensions of the final segment of
  ``path``, or an empty list if ``path`` has no final segment.
  """
  name = get_final_segment(path)

  if name is None:
    return []

  base_name, extensions = split_name(name)
  return [base_name, *extensions]
