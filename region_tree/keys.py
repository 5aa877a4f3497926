"""
keys
~~~~

The field names used to read a region record.  Front- and back-end data sets
rarely agree on naming, so each of the four structural fields can be
overridden; anything not overridden keeps its default.
"""

import collections as _collections

MapKeys = _collections.namedtuple("MapKeys", "pid id text child")

DEFAULT_KEYS = MapKeys(pid="pid", id="id", text="text", child="child")

def map_keys(overrides=None):
    """Complete a (partial) mapping of field names.

    :param overrides: `None`, or a dictionary with some of the keys `pid`,
      `id`, `text`, `child`.  Missing or empty values take the default.  A
      :class:`MapKeys` instance is also accepted.

    :return: Instance of :class:`MapKeys`.
    """
    if overrides is None:
        return DEFAULT_KEYS
    if isinstance(overrides, MapKeys):
        overrides = overrides._asdict()
    return MapKeys(**{ name : overrides.get(name) or default
        for name, default in DEFAULT_KEYS._asdict().items() })
