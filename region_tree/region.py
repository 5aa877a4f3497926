"""
region
~~~~~~

The region selector: the controller which ties together the index, the
selection and the layout, and drives a view.

The view is any object providing:

  - `controller`: a settable attribute.
  - `clear()`: remove everything displayed.
  - `build(composition)`: display a :class:`region_tree.layout.Composition`;
    clicking on the check box of a region should call :meth:`RegionSelector.toggle`.
  - `set_state(region_id, state)`: show the :class:`region_tree.selection.State`
    of a region.
  - `fit(composition)`: run :func:`region_tree.layout.fit` once drawn.
  - `destroy()`: release the display.

By default, :class:`region_tree.tk.region_view.RegionView` is used.
"""

import logging as _logging

from region_tree.index import HierarchyIndex
from region_tree.layout import Composer
from region_tree.options import Options
from region_tree.selection import Selection
from region_tree.tk.region_view import RegionView


class RegionSelector():
    """Main class.  The "view" can be accessed from the :attr:`view`
    attribute.  Register a callback on a selection change by setting the
    :attr:`callback` attribute.

    :param parent: If you wish to build the default view, pass the `tk` parent
      widget.
    :param options: An instance of :class:`region_tree.options.Options`, or a
      dictionary of options, or `None` to use the defaults.
    :param view: View object; typically leave as `None` to use the default.
    """
    def __init__(self, parent=None, options=None, view=None):
        if options is None:
            options = Options()
        elif not isinstance(options, Options):
            options = Options(**options)
        self._options = options
        self._logger = _logging.getLogger(__name__)
        self._reset_model()
        self._callback = None
        if view is None:
            view = RegionView(parent, self, options)
        else:
            view.controller = self
        self.view = view

    def _reset_model(self):
        self._index = HierarchyIndex(self._options.field_keys)
        self._selection = Selection(self._index)
        self._composition = None

    @property
    def options(self):
        return self._options

    @property
    def index(self):
        """The current :class:`region_tree.index.HierarchyIndex`."""
        return self._index

    @property
    def selection(self):
        """The current :class:`region_tree.selection.Selection`."""
        return self._selection

    @property
    def composition(self):
        """The current :class:`region_tree.layout.Composition`, or `None` if
        nothing is loaded."""
        return self._composition

    @property
    def callback(self):
        """A callable with signature `callback()` which is called when the
        user changes the selection.  Call :meth:`get_selected` to see the
        selection."""
        return self._callback

    @callback.setter
    def callback(self, v):
        self._callback = v

    def load(self, records, selected=None):
        """Replace whatever is displayed by the given regions.

        :param records: List of records, flat or nested.  If empty or `None`
          then nothing happens.
        :param selected: Optional id, or iterable of ids, to select.
        """
        if not records:
            self._logger.debug("No records to load; keeping current state")
            return
        index = HierarchyIndex(self._options.field_keys)
        index.ingest(records)
        selection = Selection(index)
        if selected is not None:
            selection.set_all(selected)
        self._index = index
        self._selection = selection
        self._rebuild()
        self._refresh(index.ids())
        self.view.fit(self._composition)
        self._logger.info("Loaded %s regions", len(index))

    def add_children(self, parent_id, records):
        """Replace the children of an existing region by the given records,
        and redisplay.  Selected regions which still exist stay selected.

        :param parent_id: The id of the region.
        :param records: List of records, flat or nested.
        """
        selected = self.get_selected()
        self._index.ingest(records, parent_id)
        self._rebuild()
        self.set_selected([region_id for region_id in selected if region_id in self._index])
        self.view.fit(self._composition)
        self._logger.info("Replaced children of region %r; now %s regions", parent_id, len(self._index))

    def _rebuild(self):
        composer = Composer(self._index, self._options.layout, self._options.z_index)
        self._composition = composer.compose()
        self.view.clear()
        self.view.build(self._composition)

    def _refresh(self, region_ids):
        if self._composition is None:
            return
        for region_id in region_ids:
            if region_id in self._composition.nodes:
                self.view.set_state(region_id, self._selection.state(region_id))

    def get_selected(self):
        """List of the ids of the checked regions.  Half checked regions are
        not included."""
        return self._selection.selected()

    def set_selected(self, region_ids):
        """Check exactly the given regions (and their descendants).

        :param region_ids: An id, or an iterable of ids.
        """
        self._selection.set_all(region_ids)
        self._refresh(self._index.ids())

    def toggle(self, region_id):
        """Notify that the user has clicked on the check box of a region."""
        changed = self._selection.invert(region_id)
        self._logger.debug("Region %r now %s; %s regions changed", region_id,
            self._selection.state(region_id).value, len(changed))
        self._refresh(changed)
        if self.callback is not None:
            self.callback()

    def dispose(self):
        """Release the view, and forget all regions."""
        self.view.destroy()
        self._reset_model()
