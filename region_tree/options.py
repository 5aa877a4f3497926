"""
options
~~~~~~~

Construction options for the region widget: a simple key/value store with
defaults, which can be read from, and saved to, a JSON file.
"""

import collections as _collections
import copy as _copy
import logging as _logging
import json as _json

from region_tree.keys import map_keys
from region_tree.layout import LayoutConfig

_logger = _logging.getLogger(__name__)

DEFAULTS = {
    "delay" : 0,
    "z_index" : 1000,
    "layout" : [],
    "width" : 800,
    "map_keys" : {},
    }


class Options(_collections.UserDict):
    """Dictionary-like object holding the widget options.  Keys:

      - `delay`: Milliseconds to wait after the pointer leaves a pop-out
        before hiding it.
      - `z_index`: Base stacking value for pop-outs.
      - `layout`: List of strategy names, one per depth.
      - `width`: Width of the widget, in pixels.
      - `map_keys`: Dictionary of field name overrides.

    Supports the context manager protocol, and on exiting the context saves
    itself (if there is a filename).

    :param filename: Optional JSON file to load from (and save to).
    :param kwargs: Options which override the defaults and the file.
    """
    def __init__(self, filename=None, **kwargs):
        super().__init__(_copy.deepcopy(DEFAULTS))
        self._filename = filename
        if filename is not None:
            self._load()
        for key, value in kwargs.items():
            self[key] = value

    def _load(self):
        _logger.info("Loading options from '%s'", self._filename)
        try:
            with open(self._filename, "rt") as options_file:
                loaded = _json.load(options_file)
        except FileNotFoundError:
            _logger.info("No options file found, using defaults.")
            return
        except _json.JSONDecodeError as ex:
            _logger.error("Failed to load options file so using defaults; caused by %s", ex)
            return
        for key, value in loaded.items():
            if key in DEFAULTS:
                self[key] = value
            else:
                _logger.warning("Ignoring unknown option '%s'", key)

    def __setitem__(self, key, value):
        if key not in DEFAULTS:
            raise KeyError("Unknown option '{}'".format(key))
        if key == "layout":
            value = LayoutConfig(value).tags
        elif key in ("delay", "z_index", "width"):
            value = int(value)
            if value < 0 and key != "z_index":
                raise ValueError("Option '{}' cannot be negative".format(key))
        elif key == "map_keys":
            value = dict(value or {})
        super().__setitem__(key, value)

    @property
    def filename(self):
        """The filename in use, or `None`."""
        return self._filename

    def save(self):
        """Save the current state to the options file."""
        if self._filename is None:
            raise ValueError("No filename to save to")
        json_string = _json.dumps(self.data, indent=2)
        with open(self._filename, "wt") as options_file:
            options_file.write(json_string)
        _logger.info("Wrote options to %s", self._filename)

    def __enter__(self):
        return self

    def __exit__(self, extype, a, b):
        if self._filename is not None:
            self.save()

    @property
    def delay(self):
        return self["delay"]

    @property
    def z_index(self):
        return self["z_index"]

    @property
    def width(self):
        return self["width"]

    @property
    def layout(self):
        """The :class:`region_tree.layout.LayoutConfig` to use."""
        return LayoutConfig(self["layout"])

    @property
    def field_keys(self):
        """The completed :class:`region_tree.keys.MapKeys`."""
        return map_keys(self["map_keys"])
