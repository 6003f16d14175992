"""Configuration management for the AlgoQuest analysis pipeline.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize experiment settings, input limits, and the sample inputs used
for the LCS and trie experiments.

File format (high-level)
------------------------
- experiment_settings: board sizes, timing runs, and output directory.
- limit_settings: bounds checked before invoking the engines.
- lcs_settings: ``sequence_sets`` evaluated by the LCS experiment.
- trie_settings: ``words`` inserted by the trie experiment.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the pipeline configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return high-level experiment settings (sizes, runs, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_limit_settings(self):
        """Return the board-size and sequence bounds."""
        return self.config.get("limit_settings", {})

    def get_lcs_sequence_sets(self):
        """Return the configured LCS inputs, or an empty list."""
        return self.config.get("lcs_settings", {}).get("sequence_sets", [])

    def get_trie_words(self):
        """Return the configured trie words, or an empty list."""
        return self.config.get("trie_settings", {}).get("words", [])

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
