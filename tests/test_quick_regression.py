"""Quick regression tests for the AlgoQuest experiment orchestrator."""

from pathlib import Path
import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from algoquest.analysis import cli, settings


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_engines_and_csv_generation(self):
        """Ensure NQ, LCS, TRIE and CSV export succeed."""
        with redirect_stdout(io.StringIO()):
            cli.run_quick_regression_tests()

    def test_algorithm_filters(self):
        self.assertIsNone(cli.parse_algorithm_filters(None))
        self.assertEqual(cli.parse_algorithm_filters(["nq,lcs", "NQ"]), ["NQ", "LCS"])
        with self.assertRaises(ValueError):
            cli.parse_algorithm_filters(["GA"])

    def test_pipeline_without_plots_writes_csvs(self):
        saved = (settings.OUT_DIR, settings.N_VALUES, settings.RUN_TAG, settings.DATE_IN_FILENAMES)
        with tempfile.TemporaryDirectory() as tmpdir:
            settings.OUT_DIR = tmpdir
            settings.N_VALUES = [4, 5, 6]
            settings.RUN_TAG = None
            settings.DATE_IN_FILENAMES = False
            try:
                with redirect_stdout(io.StringIO()):
                    cli.main_pipeline(validate=True, plots=False)
                names = {path.name for path in Path(tmpdir).iterdir()}
            finally:
                settings.OUT_DIR, settings.N_VALUES, settings.RUN_TAG, settings.DATE_IN_FILENAMES = saved

        self.assertIn("results_NQ.csv", names)
        self.assertIn("results_LCS.csv", names)
        self.assertIn("results_TRIE.csv", names)
        self.assertIn("dp_ABCBDAB_BDCABA.csv", names)

    def test_pipeline_handles_path_characters_in_sequences(self):
        saved = (settings.OUT_DIR, settings.LCS_SEQUENCE_SETS, settings.RUN_TAG, settings.DATE_IN_FILENAMES)
        with tempfile.TemporaryDirectory() as tmpdir:
            settings.OUT_DIR = tmpdir
            settings.LCS_SEQUENCE_SETS = [["A/B", "AB"]]
            settings.RUN_TAG = None
            settings.DATE_IN_FILENAMES = False
            try:
                with redirect_stdout(io.StringIO()):
                    cli.main_pipeline(["LCS"], plots=False)
                names = {path.name for path in Path(tmpdir).iterdir()}
            finally:
                settings.OUT_DIR, settings.LCS_SEQUENCE_SETS, settings.RUN_TAG, settings.DATE_IN_FILENAMES = saved

        self.assertEqual(names, {"results_LCS.csv", "dp_A_B_AB.csv"})

    def test_missing_config_exits_with_status_1(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--config", "/nonexistent/algoquest-config.json"])
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
