"""
selection
~~~~~~~~~

Tri-state selection of the regions in a :class:`region_tree.index.HierarchyIndex`.

Each region is "unchecked", "checked" or "half checked".  Only the first two
may be requested; "half checked" arises when some, but not all, of the
children of a region are checked.  After any change:

  - A region is checked exactly when all its children are checked (or it has
    no children and was itself checked).
  - A region is unchecked exactly when all its children are unchecked (or it
    has no children and was itself unchecked).
  - Otherwise it is half checked.

Changing a region sets its whole subtree, and then recomputes its chain of
ancestors.  Nothing else is visited.
"""

import collections.abc as _abc
import enum as _enum
import logging as _logging

from region_tree.errors import RegionNotFoundError

_logger = _logging.getLogger(__name__)


class State(_enum.Enum):
    """The values are the style names used by the view."""
    UNCHECKED = "unchecked"
    CHECKED = "checked"
    HALF_CHECKED = "halfchecked"


class Selection():
    """Selection state keyed by region id.  Every region starts unchecked.

    :param index: The :class:`region_tree.index.HierarchyIndex` giving the
      tree.  We read it, but never change it.
    """
    def __init__(self, index):
        self._index = index
        self._states = dict()

    def _check_known(self, region_id):
        if region_id not in self._index:
            raise RegionNotFoundError(region_id)

    def state(self, region_id):
        """The :class:`State` of the region."""
        self._check_known(region_id)
        return self._states.get(region_id, State.UNCHECKED)

    def items(self):
        """Generate pairs `(region_id, state)` for every region."""
        for region_id in self._index.ids():
            yield region_id, self._states.get(region_id, State.UNCHECKED)

    def reset(self):
        """Uncheck everything."""
        self._states.clear()

    def toggle(self, region_id, state):
        """Set the state of the region and all of its descendants, and then
        recompute the state of its ancestors.

        :param region_id: The region to change.
        :param state: :class:`State.CHECKED` or :class:`State.UNCHECKED`, or
          the matching string value.

        :return: List of the ids whose state was written: the region, its
          descendants, and then its ancestors, nearest first.
        """
        state = State(state)
        if state == State.HALF_CHECKED:
            raise ValueError("Cannot directly request the half checked state")
        self._check_known(region_id)
        # Walk both directions before writing, so a cycle leaves us unchanged
        subtree = [region_id]
        subtree.extend(self._index.descendants(region_id))
        ancestors = list(self._index.ancestors(region_id))

        for child_id in subtree:
            self._states[child_id] = state
        for parent_id in ancestors:
            siblings = self._index.relation(parent_id).child_ids
            if any(self._states.get(s, State.UNCHECKED) != state for s in siblings):
                # Once half checked, every ancestor above is also mixed
                state = State.HALF_CHECKED
            self._states[parent_id] = state
        return subtree + ancestors

    def invert(self, region_id):
        """What clicking on a check box does: a checked region becomes
        unchecked, otherwise it becomes checked.

        :return: As :meth:`toggle`.
        """
        if self.state(region_id) == State.CHECKED:
            return self.toggle(region_id, State.UNCHECKED)
        return self.toggle(region_id, State.CHECKED)

    def set_all(self, region_ids):
        """Uncheck everything, and then check each of the given regions (and
        so their descendants).

        :param region_ids: An iterable of ids, or a single id.  Duplicates are
          ignored.
        """
        if isinstance(region_ids, (str, bytes)) or not isinstance(region_ids, _abc.Iterable):
            region_ids = [region_ids]
        region_ids = list(dict.fromkeys(region_ids))
        for region_id in region_ids:
            self._check_known(region_id)
        self.reset()
        for region_id in region_ids:
            self.toggle(region_id, State.CHECKED)
        _logger.debug("Selected %s regions", len(region_ids))

    def selected(self):
        """List of the ids of the checked regions, in index order.  Half
        checked regions are not included."""
        return [region_id for region_id, state in self.items()
            if state == State.CHECKED]
