"""Utility functions."""

from typing import Optional


def reprify_object(object_, name: Optional[str] = None) -> str:
  """Returns a string representation of ``object_`` suitable for ``repr()``,
  e.g. ``'<pathext.path.pathext.PathExt "some/path" at 0x...>'``.

  ``name`` is displayed in place of the default ``'object'`` if specified.
  """
  object_type = type(object_)
  object_id = id(object_)

  return '<{}.{} {} at {}>'.format(
    object_type.__module__,
    object_type.__qualname__,
    f'"{name}"' if name is not None else 'object',
    f'{object_id:#0{32 - len(hex(object_id))}x}',
  )


def get_pathext_module_path() -> str:
  """Returns the top-level module path of the pathext library, e.g. for use in
  `unittest.mock.patch` targets.
  """
  return __name__.rpartition('.')[0]
