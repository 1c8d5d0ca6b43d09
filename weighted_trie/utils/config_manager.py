# config_manager.py - JSON config for the demo harness

import json
import logging
import os

from rich.console import Console
from rich.table import Table
from rich import box

logger = logging.getLogger(__name__)

DEFAULTS = {
    "prefix": "py",
    "max_suggestions": 1,
    "json_indent": None,
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            logger.debug("no config at %s, using defaults", self.path)
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read config %s: %s (using defaults)", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("config %s is not a JSON object (using defaults)", self.path)
            return
        for k, v in raw.items():
            if k not in self.data:
                logger.warning("ignoring unknown config option %r", k)
                continue
            try:
                self.set(k, v)
            except (TypeError, ValueError) as e:
                logger.warning("bad value for %r in %s: %s (keeping default)", k, self.path, e)

    def get(self, key):
        return self.data[key]

    def save(self):
        if not self.path:
            raise ValueError("config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self, console=None):
        table = Table(title="Config", box=box.SIMPLE, show_edge=False)
        table.add_column("Option", style="cyan")
        table.add_column("Value", style="bold")
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        (console or Console()).print(table)

    def set(self, key, val):
        """Set an option, coercing `val` to the default's type (None defaults accept ints)."""
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        if val is None:
            if default is not None:
                raise TypeError(f"{key} cannot be null")
            self.data[key] = None
        elif default is None:
            self.data[key] = int(val)
        else:
            self.data[key] = type(default)(val)
