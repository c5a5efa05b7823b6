# config_manager.py - JSON config manager

import json
import os

from typing_extensions import TypedDict

from keyword_trie.utils.logger_utils import Log


class ConfigData(TypedDict):
    separator: object      # single character, or None for no separator
    max_results: int       # cap on listed keys in the CLI
    log_path: str
    use_color: bool


DEFAULTS: ConfigData = {
    "separator": ".",
    "max_results": 50,
    "log_path": os.path.join("logs", "keyword_trie.log"),
    "use_color": True,
}

NO_SEPARATOR = (None, "", "none", "null")


def _coerce(key, val):
    """Convert a raw option value to the type of its default. Bad values raise ValueError/TypeError."""
    if key == "separator":
        if val in NO_SEPARATOR:
            return None
        if not isinstance(val, str) or len(val) != 1:
            raise ValueError(f"separator must be a single character, got {val!r}")
        return val
    if isinstance(DEFAULTS[key], bool):
        if isinstance(val, str):
            return val.strip().lower() in ("1", "true", "yes", "on")
        if isinstance(val, (bool, int)):
            return bool(val)
        raise TypeError(f"{key} must be a boolean, got {val!r}")
    return type(DEFAULTS[key])(val)


class Config:
    """
    Options merged from a JSON file over DEFAULTS.
    Without an explicit log, problems found while loading go to the
    log file named by the loaded `log_path`.
    """

    def __init__(self, path="config.json", log: Log = None):
        self.path = path
        self.data = dict(DEFAULTS)
        self.log = log
        pending = self._load()
        if self.log is None:
            self.log = Log(self.data["log_path"], use_color=self.data["use_color"], echo=False)
        for msg in pending:
            self.log.warning(msg)

    def _load(self):
        """Read the file into self.data; returns warnings to log."""
        if not os.path.exists(self.path):
            self.save()
            return []
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            return [f"[Config] could not read {self.path}, using defaults: {e}"]
        if not isinstance(loaded, dict):
            return [f"[Config] {self.path} is not a JSON object, using defaults"]

        warnings = []
        for k, v in loaded.items():
            if k not in self.data:
                warnings.append(f"[Config] ignoring unknown option {k!r}")
                continue
            try:
                self.data[k] = _coerce(k, v)
            except (TypeError, ValueError) as e:
                warnings.append(f"[Config] bad value for {k!r}, keeping {DEFAULTS[k]!r}: {e}")
        return warnings

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        """Set an option, coercing to the type of its default, and save. Unknown option -> KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()
