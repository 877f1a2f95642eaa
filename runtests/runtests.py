#!/usr/bin/env python3

"""Runs automated tests of the pathext library.

Test modules are modules under the repository root whose name starts with
``'test_'``. Examples:

  python runtests/runtests.py
  python runtests/runtests.py --modules pathext.tests.path
  python runtests/runtests.py --ignored-modules pathext.tests.test_utils --output report.txt
"""

import argparse
import importlib
import os
import pkgutil
import sys
from typing import Iterable, List, TextIO
import unittest

ROOT_DIRPATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIRPATH not in sys.path:
  sys.path.append(ROOT_DIRPATH)


def find_test_modules(
      dirpath: str,
      prefix: str = 'test_',
      modules: Iterable[str] = (),
      ignored_modules: Iterable[str] = ()) -> List[str]:
  """Returns full names of test modules located under ``dirpath``.

  ``modules`` and ``ignored_modules`` are module name prefixes. If ``modules``
  is empty, every test module not matching ``ignored_modules`` is returned.
  """
  modules = tuple(modules)
  ignored_modules = tuple(ignored_modules)

  module_names = []
  for _importer, module_name, _is_package in pkgutil.walk_packages(path=[dirpath]):
    if modules and not module_name.startswith(modules):
      continue
    if ignored_modules and module_name.startswith(ignored_modules):
      continue
    if module_name.rpartition('.')[2].startswith(prefix):
      module_names.append(module_name)

  return module_names


def run_tests(module_names: Iterable[str], stream: TextIO) -> bool:
  """Runs tests from the specified modules in a single suite and returns
  ``True`` if all of them passed.
  """
  loader = unittest.TestLoader()
  suite = unittest.TestSuite(
    loader.loadTestsFromModule(importlib.import_module(module_name))
    for module_name in module_names)

  return unittest.TextTestRunner(stream=stream, verbosity=2).run(suite).wasSuccessful()


def main():
  parser = argparse.ArgumentParser(description='Runs automated tests of pathext')
  parser.add_argument('--dirpath', default=ROOT_DIRPATH, help='Directory containing test modules')
  parser.add_argument('--prefix', default='test_', help='Prefix of test module names')
  parser.add_argument('--modules', nargs='*', default=[], help='Module prefixes to include')
  parser.add_argument(
    '--ignored-modules', nargs='*', default=[], help='Module prefixes to exclude')
  parser.add_argument('--output', default=None, help='File to write the report to')

  args = parser.parse_args()

  module_names = find_test_modules(args.dirpath, args.prefix, args.modules, args.ignored_modules)

  if args.output is None:
    was_successful = run_tests(module_names, sys.stderr)
  else:
    with open(args.output, 'w', encoding='utf-8') as output_file:
      was_successful = run_tests(module_names, output_file)

  sys.exit(0 if was_successful else 1)


if __name__ == '__main__':
  main()
