"""
region_tree
~~~~~~~~~~~

A selectable tree of (administrative) regions.  Records, flat or nested, are
indexed, composed into nested groups using a per-level layout, and displayed
with tri-state check boxes whose state propagates up and down the tree.

The canonical entry point is :class:`region_tree.region.RegionSelector`.
"""

__version__ = "0.1.0"
