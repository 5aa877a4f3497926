"""
errors
~~~~~~

Exceptions raised by the region model.
"""

class RegionError(Exception):
    """Base class of all our errors."""
    pass


class RegionNotFoundError(RegionError, KeyError):
    """An id was used which does not name a known region."""
    def __init__(self, region_id):
        super().__init__(region_id)
        self.region_id = region_id

    def __str__(self):
        return "Region '{}' not found".format(self.region_id)


class MalformedHierarchyError(RegionError, ValueError):
    """The input records do not form a tree: a duplicated id, or a cycle."""
    pass
