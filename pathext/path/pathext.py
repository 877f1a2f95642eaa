"""Wrapper exposing path functions as methods of a path-like object."""

import os
from typing import List, Optional

from . import components as components_
from . import fileext as fileext_
from . import pathlike as pathlike_
from .. import utils as pgutils

__all__ = [
  'PathExt',
]


class PathExt(os.PathLike):
  """Read-only wrapper of a path-like value.

  The wrapped value is converted to its textual form on instantiation. As
  `PathExt` implements `os.PathLike`, instances can be passed anywhere a path
  is expected, including the functions in the `fileext` and `components`
  modules:

    >>> PathExt('/some/path').has_component('path')
    True
    >>> PathExt('archive.tar.gz').strip_extensions()
    'archive'
  """

  __slots__ = ('_path',)

  def __init__(self, path: pathlike_.PathLike):
    self._path = pathlike_.to_path_str(path)

  @property
  def path(self) -> str:
    """Textual form of the wrapped path."""
    return self._path

  def __fspath__(self) -> str:
    return self._path

  def __str__(self) -> str:
    return self._path

  def __repr__(self) -> str:
    return pgutils.reprify_object(self, self._path)

  def __eq__(self, other) -> bool:
    if isinstance(other, PathExt):
      return self._path == other._path
    return NotImplemented

  def __hash__(self) -> int:
    return hash(self._path)

  def ends_with_extensions(self, suffix: pathlike_.PathLike) -> bool:
    return fileext_.ends_with_extensions(self._path, suffix)

  def strip_extensions(self) -> Optional[str]:
    return fileext_.strip_extensions(self._path)

  def get_extension_chain(self) -> List[str]:
    return fileext_.get_extension_chain(self._path)

  def has_component(self, component: pathlike_.PathLike) -> bool:
    return components_.has_component(self._path, component)

  def contains(self, pattern: str) -> bool:
    return components_.contains(self._path, pattern)

  def starts_or_ends_with(self, pattern: str) -> bool:
    return components_.starts_or_ends_with(self._path, pattern)
