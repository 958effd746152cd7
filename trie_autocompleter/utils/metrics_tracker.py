# metrics_tracker.py - running averages of command latencies

import json
import os
from collections import defaultdict

from trie_autocompleter.utils.logger_utils import log


class Metrics:
    """
    Per-key sum/count of recorded values.
    With a path, earlier totals are loaded on start and save() writes them back.
    """

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        if path is not None:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            log.warning(f"metrics {self.path} unreadable, starting fresh: {e}")
            self.m.clear()
            self.n.clear()

    def save(self):
        if self.path is None:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def rows(self):
        """(key, calls, avg seconds) sorted by key."""
        return [(k, self.n[k], self.avg(k)) for k in sorted(self.m)]
