"""Functions matching path components or patterns in the textual form of
paths.
"""

from . import pathlike as pathlike_

__all__ = [
  'has_component',
  'contains',
  'starts_or_ends_with',
]


def has_component(path: pathlike_.PathLike, component: pathlike_.PathLike) -> bool:
  """Returns ``True`` if ``component`` is equal to one of the components of
  ``path``, ``False`` otherwise.

  ``component`` is compared as a whole, i.e. ``'/some/path'`` has the
  component ``'path'``, but not ``'pat'`` or ``'some/path'``. The root is a
  component of an absolute path as well.
  """
  component_str = pathlike_.to_path_str(component)

  return any(
    path_component == component_str for path_component in pathlike_.get_components(path))


def contains(path: pathlike_.PathLike, pattern: str) -> bool:
  """Returns ``True`` if ``pattern`` is a substring of the textual form of
  ``path``.
  """
  return pattern in pathlike_.to_path_str(path)


def starts_or_ends_with(path: pathlike_.PathLike, pattern: str) -> bool:
  """Returns ``True`` if the textual form of ``path`` starts or ends with
  ``pattern``.
  """
  path_str = pathlike_.to_path_str(path)
  return path_str.startswith(pattern) or path_str.endswith(pattern)
