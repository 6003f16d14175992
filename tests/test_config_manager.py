"""Tests for configuration loading and its application to settings."""

from pathlib import Path
import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from algoquest.analysis import cli, settings

_SAVED_NAMES = (
    "N_VALUES",
    "RUNS_NQ_FINAL",
    "OUT_DIR",
    "MAX_BOARD_SIZE",
    "MAX_SEQUENCE_LENGTH",
    "MAX_SEQUENCE_COUNT",
    "LCS_SEQUENCE_SETS",
    "TRIE_WORDS",
)


class ConfigManagerTests(unittest.TestCase):

    def setUp(self):
        self._saved = {name: getattr(settings, name) for name in _SAVED_NAMES}
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config.json"

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self._tmp.cleanup()

    def _write(self, payload):
        self.path.write_text(json.dumps(payload))

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(self.path)

    def test_getters_and_defaults(self):
        self._write({"trie_settings": {"words": ["a", "b"]}})
        mgr = ConfigManager(self.path)
        self.assertEqual(mgr.get_trie_words(), ["a", "b"])
        self.assertEqual(mgr.get_lcs_sequence_sets(), [])
        self.assertEqual(mgr.get_experiment_settings(), {})
        self.assertEqual(mgr.get_limit_settings(), {})

    def test_update_setting_persists(self):
        self._write({})
        mgr = ConfigManager(self.path)
        mgr.update_setting("experiment_settings", "runs_nq_final", 5)
        reloaded = ConfigManager(self.path)
        self.assertEqual(reloaded.get_experiment_settings(), {"runs_nq_final": 5})

    def test_repository_config_loads(self):
        mgr = ConfigManager(ROOT / "config.json")
        self.assertIn(8, mgr.get_experiment_settings()["N_values"])

    def test_apply_configuration_updates_settings(self):
        self._write({
            "experiment_settings": {"N_values": [4, 6], "runs_nq_final": 2, "output_dir": "out"},
            "limit_settings": {"max_board_size": 9},
            "lcs_settings": {"sequence_sets": [["abc", "bcd"]]},
            "trie_settings": {"words": ["x", "xy"]},
        })
        with redirect_stdout(io.StringIO()):
            cli.apply_configuration(str(self.path))
        self.assertEqual(settings.N_VALUES, [4, 6])
        self.assertEqual(settings.RUNS_NQ_FINAL, 2)
        self.assertEqual(settings.OUT_DIR, "out")
        self.assertEqual(settings.MAX_BOARD_SIZE, 9)
        self.assertEqual(settings.LCS_SEQUENCE_SETS, [["abc", "bcd"]])
        self.assertEqual(settings.TRIE_WORDS, ["x", "xy"])

    def test_board_size_limit_is_enforced(self):
        self._write({
            "experiment_settings": {"N_values": [4, 14]},
            "limit_settings": {"max_board_size": 12},
        })
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(ValueError):
                cli.apply_configuration(str(self.path))

    def test_single_sequence_set_is_rejected(self):
        self._write({"lcs_settings": {"sequence_sets": [["abc"]]}})
        with self.assertRaises(ValueError):
            cli.apply_configuration(str(self.path))

    def test_sequence_limits(self):
        settings.MAX_SEQUENCE_LENGTH = 3
        settings.MAX_SEQUENCE_COUNT = 2
        settings.check_sequences(["abc", "abd"])
        with self.assertRaises(ValueError):
            settings.check_sequences(["abcd", "abd"])
        with self.assertRaises(ValueError):
            settings.check_sequences(["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
