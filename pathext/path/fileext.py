"""Functions dealing with file extensions, including multi-part extensions such
as ``'.tar.gz'``.
"""

from typing import List, Optional

from . import pathlike as pathlike_
from .. import constants as pgconstants

__all__ = [
  'ends_with_extensions',
  'strip_extensions',
  'get_extension_chain',
]


def ends_with_extensions(path: pathlike_.PathLike, suffix: pathlike_.PathLike) -> bool:
  """Returns ``True`` if the final segment of ``path`` ends with the
  period-separated parts in ``suffix``, ``False`` otherwise.

  Unlike `str.endswith()`, whole parts are compared, e.g. ``'archive.tar.gz'``
  ends with ``'.tar.gz'`` and ``'gz'``, but not with ``'ar.gz'``. The leading
  period in ``suffix`` is optional. The comparison is case-sensitive.

  The base name counts as a part as well, hence ``'tar.gz'`` ends with
  ``'tar.gz'``. A final segment identical to ``suffix`` always matches, which
  includes hidden files (``'.gitignore'`` ends with ``'.gitignore'``). Hidden
  files do not treat their leading period as a separator otherwise, so
  ``'.gitignore'`` does not end with ``'gitignore'``.

  An empty ``suffix`` or a suffix consisting of a single period never matches.
  """
  separator = pgconstants.EXTENSION_SEPARATOR

  name = pathlike_.get_final_segment(path)
  if name is None:
    return False

  suffix_str = pathlike_.to_path_str(suffix)
  if suffix_str == name:
    return True

  if suffix_str.startswith(separator):
    suffix_str = suffix_str[len(separator):]

  if not suffix_str:
    return False

  suffix_parts = suffix_str.split(separator)
  base_name, extensions = pathlike_.split_name(name)
  name_parts = [base_name, *extensions]

  if len(name_parts) < len(suffix_parts):
    return False

  return name_parts[len(name_parts) - len(suffix_parts):] == suffix_parts


def strip_extensions(path: pathlike_.PathLike) -> Optional[str]:
  """Returns the final segment of ``path`` with all file extensions removed.

  For example, ``'multiple-extensions.tar.gz'`` becomes
  ``'multiple-extensions'``. Hidden files keep their leading period
  (``'.gitignore'`` remains unchanged, ``'.config.json'`` becomes
  ``'.config'``). Empty extensions are removed as well, so ``'a.b.'`` becomes
  ``'a'``.

  ``None`` is returned if ``path`` has no final segment, e.g. if ``path`` is
  empty or is a root directory.
  """
  name = pathlike_.get_final_segment(path)

  if name is None:
    return None

  base_name, _unused = pathlike_.split_name(name)
  return base_name


def get_extension_chain(path: pathlike_.PathLike) -> List[str]:
  """Returns all file extensions of the final segment of ``path`` without
  periods, e.g. ``['tar', 'gz']`` for ``'archive.tar.gz'``.
  """
  return pathlike_.get_name_parts(path)[1:]
