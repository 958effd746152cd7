# config_manager.py - JSON config manager

import json
import os

from trie_autocompleter.utils.logger_utils import Log, log

DEFAULTS = {
    "encoding": "utf-8",        # source file encoding
    "log_level": "INFO",
    "log_path": None,           # append log lines here as well as stderr
    "use_color": True,
    "cache_mirror": True,       # keep the suffix-query mirror trie between queries
    "reverse_output": "words",  # "words" | "mirrored"
}

REVERSE_OUTPUTS = ("words", "mirrored")


def check_option(key, val):
    """Return the value to store for `key`; ValueError if it is not acceptable."""
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if not isinstance(val, bool):
            raise ValueError(f"{key} must be true or false, got {val!r}")
    elif default is None:
        if val is not None and not isinstance(val, str):
            raise ValueError(f"{key} must be a path or null, got {val!r}")
    elif not isinstance(val, str):
        raise ValueError(f"{key} must be a string, got {val!r}")
    if key == "log_level":
        val = val.upper()
        if val not in Log.LEVELS:
            raise ValueError(f"log_level must be one of {tuple(Log.LEVELS)}")
    if key == "reverse_output" and val not in REVERSE_OUTPUTS:
        raise ValueError(f"reverse_output must be one of {REVERSE_OUTPUTS}")
    return val


class Config:
    """
    Settings merged from a JSON file over DEFAULTS.
    path=None keeps the defaults in memory only; a path that does not
    exist yet is created with the defaults.
    Bad values in the file are logged and replaced by their default.
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path is not None:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(f"config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(loaded, dict):
            log.warning(f"config {self.path} is not a JSON object, using defaults")
            return
        unknown = sorted(set(loaded) - set(DEFAULTS))
        if unknown:
            log.warning(f"config {self.path}: ignoring unknown keys {unknown}")
        for key in DEFAULTS:
            if key not in loaded:
                continue
            try:
                self.data[key] = check_option(key, loaded[key])
            except ValueError as e:
                log.warning(f"config {self.path}: {e}; using {DEFAULTS[key]!r}")

    def save(self):
        if self.path is None:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def rows(self):
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def show(self, console):
        for row in self.rows():
            console.print(row, markup=False, highlight=False)

    def set(self, key, val):
        """
        Set an option and save. Strings are coerced for boolean options
        ("on"/"off", "true"/"false") and "null"/"none" clears log_path.
        Unknown key -> KeyError, bad value -> ValueError.
        """
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        if isinstance(default, bool) and isinstance(val, str):
            word = val.strip().lower()
            if word in ("1", "true", "yes", "on"):
                val = True
            elif word in ("0", "false", "no", "off"):
                val = False
        elif default is None and isinstance(val, str) and val.lower() in ("null", "none"):
            val = None
        self.data[key] = check_option(key, val)
        self.save()
