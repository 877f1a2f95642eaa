import os
import pathlib
import unittest

import parameterized

from ...path import pathlike


class TestToPathStr(unittest.TestCase):

  @parameterized.parameterized.expand([
    ('string', 'some/path', 'some/path'),
    ('string_with_trailing_separator', 'some/path/', 'some/path/'),
    ('bytes', b'some/path', 'some/path'),
    ('path_object', pathlib.PurePosixPath('some/path'), 'some/path'),
    ('empty_string', '', ''),
  ])
  def test_to_path_str(self, _test_case_suffix, path, expected_result):
    self.assertEqual(pathlike.to_path_str(path), expected_result)

  def test_undecodable_bytes_are_preserved(self):
    path = b'some/\xff.txt'

    self.assertEqual(os.fsencode(pathlike.to_path_str(path)), path)

  @parameterized.parameterized.expand([
    ('none', None),
    ('integer', 1),
    ('list', ['some', 'path']),
  ])
  def test_to_path_str_with_invalid_type(self, _test_case_suffix, path):
    with self.assertRaises(TypeError):
      pathlike.to_path_str(path)


class TestGetFinalSegment(unittest.TestCase):

  @parameterized.parameterized.expand([
    ('filename', 'archive.tar.gz', 'archive.tar.gz'),
    ('absolute_path', '/some/path', 'path'),
    ('relative_path', 'some/path.txt', 'path.txt'),
    ('hidden_file', 'some/.gitignore', '.gitignore'),
    ('inner_current_directory', 'some/./path', 'path'),
    ('empty_path', '', None),
    ('root', '/', None),
    ('trailing_separator', 'some/path/', None),
    ('current_directory', '.', None),
    ('parent_directory', '..', None),
    ('trailing_parent_directory', 'some/path/..', None),
  ])
  def test_get_final_segment(self, _test_case_suffix, path, expected_result):
    self.assertEqual(pathlike.get_final_segment(path), expected_result)


class TestSplitName(unittest.TestCase):

  @parameterized.parameterized.expand([
    ('no_extension', 'noext', ('noext', [])),
    ('single_extension', 'image.png', ('image', ['png'])),
    ('multiple_extensions', 'archive.tar.gz', ('archive', ['tar', 'gz'])),
    ('hidden_file', '.gitignore', ('.gitignore', [])),
    ('hidden_file_with_extension', '.config.json', ('.config', ['json'])),
    ('trailing_period', 'a.b.', ('a', ['b', ''])),
    ('consecutive_periods', 'a..b', ('a', ['', 'b'])),
    ('single_period', '.', ('.', [])),
    ('empty_name', '', ('', [])),
  ])
  def test_split_name(self, _test_case_suffix, name, expected_result):
    self.assertEqual(pathlike.split_name(name), expected_result)


class TestGetComponents(unittest.TestCase):

  def test_get_components(self):
    self.assertEqual(
      pathlike.get_components(os.path.join(os.sep, 'some', 'path')),
      (os.sep, 'some', 'path'))
    self.assertEqual(pathlike.get_components(os.path.join('some', 'path')), ('some', 'path'))
    self.assertEqual(pathlike.get_components(''), ())

  @parameterized.parameterized.expand([
    ('leading_current_directory', os.path.join('.', 'a'), ('a',)),
    ('inner_current_directory', os.path.join('a', '.', 'b'), ('a', 'b')),
    ('current_directory_only', '.', ()),
    ('parent_directory', os.path.join('..', 'a'), ('..', 'a')),
  ])
  def test_get_components_with_relative_markers(self, _test_case_suffix, path, expected_result):
    self.assertEqual(pathlike.get_components(path), expected_result)

  def test_get_name_parts(self):
    self.assertEqual(pathlike.get_name_parts('some/archive.tar.gz'), ['archive', 'tar', 'gz'])
    self.assertEqual(pathlike.get_name_parts('some/'), [])
