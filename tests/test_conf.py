"""
Tests for conf – config persistence and the Settings singleton.

Tests cover:
- load_config() on missing, corrupt and non-dict files
- save_config() creates the config directory
- get_saved_layout() defaults and bounds
- Collaborator flags (copy_to_clipboard, feedback)
- Settings.set_layout() validation, persistence and no-op on unchanged layout
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from huewheel.conf import (
    MAX_RINGS,
    MAX_SEGMENTS,
    Settings,
    get_saved_flag,
    get_saved_layout,
    load_config,
    save_config,
    save_flag,
    save_layout,
)


class _ConfTestCase(unittest.TestCase):
    """Redirect config to a temp directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = os.path.join(self._tmp.name, 'huewheel')
        self.config_path = os.path.join(self.config_dir, 'config.json')
        self._patches = [
            patch('huewheel.conf.CONFIG_PATH', self.config_path),
            patch('huewheel.conf.CONFIG_DIR', self.config_dir),
        ]
        for p in self._patches:
            p.start()

    def tearDown(self):
        for p in reversed(self._patches):
            p.stop()
        self._tmp.cleanup()

    def _write_raw(self, text):
        os.makedirs(self.config_dir, exist_ok=True)
        with open(self.config_path, 'w') as f:
            f.write(text)


class TestLoadSave(_ConfTestCase):

    def test_missing_file(self):
        self.assertEqual(load_config(), {})

    def test_corrupt_file(self):
        self._write_raw('{not json')
        self.assertEqual(load_config(), {})

    def test_non_dict_file(self):
        self._write_raw('[1, 2, 3]')
        self.assertEqual(load_config(), {})

    def test_save_creates_directory(self):
        save_config({'rings': 5})
        self.assertTrue(os.path.isdir(self.config_dir))
        with open(self.config_path) as f:
            self.assertEqual(json.load(f), {'rings': 5})

    def test_round_trip(self):
        save_config({'feedback': False, 'segments': 12})
        self.assertEqual(load_config(), {'feedback': False, 'segments': 12})


class TestLayout(_ConfTestCase):

    def test_defaults(self):
        self.assertEqual(get_saved_layout(), (10, 24))

    def test_saved(self):
        save_layout(6, 36)
        self.assertEqual(get_saved_layout(), (6, 36))

    def test_out_of_bounds_falls_back(self):
        save_config({'rings': 0, 'segments': MAX_SEGMENTS + 1})
        self.assertEqual(get_saved_layout(), (10, 24))

    def test_garbage_falls_back(self):
        save_config({'rings': 'many', 'segments': None})
        self.assertEqual(get_saved_layout(), (10, 24))

    def test_preserves_other_keys(self):
        save_config({'feedback': False})
        save_layout(3, 4)
        self.assertEqual(load_config(), {'feedback': False, 'rings': 3, 'segments': 4})


class TestFlags(_ConfTestCase):

    def test_default_true(self):
        self.assertTrue(get_saved_flag('copy_to_clipboard'))

    def test_explicit_default(self):
        self.assertFalse(get_saved_flag('feedback', default=False))

    def test_save_flag(self):
        save_flag('feedback', False)
        self.assertFalse(get_saved_flag('feedback'))

    def test_string_value_falls_back_to_default(self):
        """A hand-edited "false" string is not a boolean."""
        save_config({'copy_to_clipboard': "false", 'feedback': 0})
        self.assertTrue(get_saved_flag('copy_to_clipboard'))
        self.assertFalse(get_saved_flag('feedback', default=False))
        self.assertTrue(Settings().copy_to_clipboard)


class TestSettings(_ConfTestCase):

    def test_initial(self):
        s = Settings()
        self.assertEqual(s.layout, (10, 24))
        self.assertTrue(s.copy_to_clipboard)
        self.assertTrue(s.feedback)

    def test_loads_saved(self):
        save_config({'rings': 4, 'segments': 12, 'copy_to_clipboard': False})
        s = Settings()
        self.assertEqual((s.ring_count, s.segment_count), (4, 12))
        self.assertFalse(s.copy_to_clipboard)

    def test_set_layout_persists(self):
        s = Settings()
        s.set_layout(12, 36)
        self.assertEqual(s.layout, (12, 36))
        self.assertEqual(get_saved_layout(), (12, 36))

    def test_set_layout_no_persist(self):
        s = Settings()
        s.set_layout(12, 36, persist=False)
        self.assertEqual(s.layout, (12, 36))
        self.assertFalse(os.path.exists(self.config_path))

    def test_set_layout_unchanged_is_noop(self):
        s = Settings()
        with patch('huewheel.conf.save_layout') as mock_save:
            s.set_layout(10, 24)
        mock_save.assert_not_called()

    def test_set_layout_rejects_bounds(self):
        s = Settings()
        with self.assertRaises(ValueError):
            s.set_layout(0, 24)
        with self.assertRaises(ValueError):
            s.set_layout(MAX_RINGS + 1, 24)
        with self.assertRaises(ValueError):
            s.set_layout(10, 0)
        self.assertEqual(s.layout, (10, 24))

    def test_toggles_persist(self):
        s = Settings()
        s.set_copy_to_clipboard(False)
        s.set_feedback(False)
        self.assertFalse(s.copy_to_clipboard)
        self.assertEqual(load_config(), {'copy_to_clipboard': False, 'feedback': False})


if __name__ == '__main__':
    unittest.main()
