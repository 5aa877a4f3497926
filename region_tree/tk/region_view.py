"""
region_view
~~~~~~~~~~~

`Tk` based view for the :class:`region_tree.region.RegionSelector` class.

Each displayed region is drawn as an "item" frame holding a "name" row (a
check box image and the label) and, if the region has children, a
container for them:

  - `line` children are stacked in rows in a container below the name,
    indented.
  - `float` children are packed side by side in a container below the name.
  - `block` children are in a container which is a child of the top frame,
    `place`d below the name (or below and to the left, if it would not fit)
    and only shown while the pointer is over the name or the container.

The top level frame is available as :attr:`RegionView.frame`; `grid` or
`pack` it into place.
"""

import logging as _logging
import tkinter as tk
import tkinter.font as tkfont
import tkinter.ttk as ttk

from region_tree.hover import BlockHover
from region_tree.layout import Strategy, fit
from region_tree.selection import State
from region_tree.tk import icons
from region_tree.tk import util
from region_tree.tk.tooltips import ToolTip

_INDENT = 18
# Label width, in characters, of items drawn side by side
_ITEM_CHARS = 12

_logger = _logging.getLogger(__name__)


class _NodeWidgets():
    def __init__(self, node):
        self.node = node
        self.item = None
        self.name = None
        self.check = None
        self.label = None
        self.tooltip = None
        self.container = None
        self.hover = None


class RegionView():
    """View for one region selector.

    :param parent: The parent `tk` widget.
    :param controller: The :class:`region_tree.region.RegionSelector`.
    :param options: The :class:`region_tree.options.Options` in use.
    """
    def __init__(self, parent, controller, options):
        self._controller = controller
        self._options = options
        self.frame = ttk.Frame(parent, width=options.width, style="Region.TFrame")
        self._icons = icons.CheckBoxIcons(self.frame)
        self._widgets = dict()
        self._init_styles()

    def _init_styles(self):
        style = ttk.Style(self.frame)
        bold = tkfont.nametofont("TkDefaultFont").copy()
        bold.configure(weight="bold")
        self._bold_font = bold
        style.configure("TopLevel.TLabel", font=bold)
        style.configure("Alternate.TFrame", background="#f4f6f8")
        style.configure("Alternate.TLabel", background="#f4f6f8")
        style.configure("PopOut.TLabel", foreground="#1f4f90")
        style.configure("PopOut.TFrame", relief="solid", borderwidth=1)

    @property
    def controller(self):
        return self._controller

    @controller.setter
    def controller(self, v):
        self._controller = v

    def clear(self):
        """Remove all regions."""
        self._cancel_timers()
        for child in self.frame.winfo_children():
            child.destroy()
        self._widgets = dict()

    def destroy(self):
        self._cancel_timers()
        self._widgets = dict()
        self.frame.destroy()

    def _cancel_timers(self):
        for widgets in self._widgets.values():
            if widgets.hover is not None:
                widgets.hover.cancel()

    def build(self, composition):
        """Draw the regions.

        :param composition: Instance of :class:`region_tree.layout.Composition`
        """
        self._build_level(self.frame, composition.roots)
        # Later (lower z) pop-outs first, so earlier ones end up on top
        popouts = sorted((w for w in self._widgets.values() if w.hover is not None),
            key = lambda w : w.node.container_z)
        for widgets in popouts:
            widgets.container.lift()
        _logger.debug("Built %s region widgets, %s pop-outs", len(self._widgets), len(popouts))

    def _build_level(self, container, nodes):
        for node in nodes:
            self._build_node(container, node)

    def _build_node(self, container, node):
        widgets = _NodeWidgets(node)
        self._widgets[node.region_id] = widgets
        frame_style = "Alternate.TFrame" if node.alternate else "TFrame"
        widgets.item = ttk.Frame(container, style=frame_style)
        if node.strategy == Strategy.LINE:
            widgets.item.pack(side=tk.TOP, fill=tk.X, anchor=tk.W)
        else:
            widgets.item.pack(side=tk.LEFT, anchor=tk.NW, padx=2)

        widgets.name = ttk.Frame(widgets.item, style=frame_style)
        widgets.name.pack(side=tk.TOP, fill=tk.X)
        widgets.check = ttk.Label(widgets.name, image=self._icons[State.UNCHECKED],
            style=self._label_style(node))
        widgets.check.pack(side=tk.LEFT, padx=(0, 4))
        widgets.check.bind("<Button-1>", lambda event, i=node.region_id : self._clicked(i))
        text = "" if node.text is None else str(node.text)
        widgets.label = ttk.Label(widgets.name, text=text, style=self._label_style(node))
        if node.strategy != Strategy.LINE:
            widgets.label["width"] = _ITEM_CHARS
        widgets.label.pack(side=tk.LEFT, fill=tk.X, expand=True)
        widgets.tooltip = ToolTip(widgets.label, text)

        if not node.children:
            return
        if node.pops_out:
            self._build_popout(widgets)
        else:
            widgets.container = ttk.Frame(widgets.item)
            if node.children_strategy == Strategy.LINE:
                widgets.container.pack(side=tk.TOP, fill=tk.X, padx=(_INDENT, 0))
            else:
                widgets.container.pack(side=tk.TOP, fill=tk.X, padx=(_INDENT, 0), pady=(0, 2))
            self._build_level(widgets.container, node.children)

    def _label_style(self, node):
        if node.pops_out:
            return "PopOut.TLabel"
        if node.top_level:
            return "TopLevel.TLabel"
        if node.alternate:
            return "Alternate.TLabel"
        return "TLabel"

    def _build_popout(self, widgets):
        # Child of the top frame, so it can be drawn over other regions
        widgets.container = ttk.Frame(self.frame, style="PopOut.TFrame", padding=4)
        widgets.hover = BlockHover(self.frame, self._options.delay,
            show = lambda : self._show(widgets),
            hide = lambda : widgets.container.place_forget())
        widgets.name.bind("<Enter>", lambda event : widgets.hover.enter_label(), add=True)
        widgets.name.bind("<Leave>", lambda event : self._left(event, widgets, True), add=True)
        widgets.container.bind("<Enter>", lambda event : widgets.hover.enter_container(), add=True)
        widgets.container.bind("<Leave>", lambda event : self._left(event, widgets, False), add=True)
        self._build_level(widgets.container, widgets.node.children)

    def _left(self, event, widgets, from_label):
        # Moving onto a child widget also generates a "leave" event
        target = widgets.name if from_label else widgets.container
        if util.is_descendant(util.widget_under_pointer(self.frame, event), target):
            return
        if from_label:
            widgets.hover.leave_label()
        else:
            widgets.hover.leave_container()

    def _place(self, widgets):
        if widgets.node.anchor_right:
            widgets.container.place(in_=widgets.name, relx=1.0, rely=1.0, anchor=tk.NE)
        else:
            widgets.container.place(in_=widgets.name, x=0, rely=1.0, anchor=tk.NW)

    def _show(self, widgets):
        self._place(widgets)
        widgets.container.lift()

    def _clicked(self, region_id):
        self._controller.toggle(region_id)

    def set_state(self, region_id, state):
        """Display the selection state of a region."""
        self._widgets[region_id].check["image"] = self._icons[state]

    def fit(self, composition):
        """Flag truncated labels, and decide which side each pop-out opens
        towards."""
        self.frame.update_idletasks()
        fit(composition.roots, _Measurer(self), self._options.width)
        for widgets in self._widgets.values():
            widgets.tooltip.enabled = widgets.node.truncated

    def widgets(self, region_id):
        return self._widgets[region_id]


class _Measurer():
    """Measures a drawn :class:`RegionView` for :func:`region_tree.layout.fit`."""
    def __init__(self, view):
        self._view = view

    def label_overflows(self, node):
        label = self._view.widgets(node.region_id).label
        font = self._view._bold_font if node.top_level else tkfont.nametofont("TkDefaultFont")
        width = label.winfo_width()
        if width <= 1:
            # Not yet mapped
            width = label.winfo_reqwidth()
        return font.measure(label["text"]) > width

    def show(self, node):
        widgets = self._view.widgets(node.region_id)
        self._view._place(widgets)
        widgets.container.update_idletasks()

    def container_right(self, node):
        container = self._view.widgets(node.region_id).container
        left = container.winfo_rootx() - self._view.frame.winfo_rootx()
        return left + container.winfo_reqwidth()

    def anchor(self, node):
        self.show(node)

    def hide(self, node):
        self._view.widgets(node.region_id).container.place_forget()
