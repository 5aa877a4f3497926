"""
layout
~~~~~~

Composes the regions of an index into a tree of :class:`ViewNode` objects,
one per displayed region, ready for a view to draw.

Each depth of the tree is laid out using one of three strategies:

  - `line`: each region takes its own row, with its children below it.  The
    children are laid out using whatever strategy their depth is configured
    with.
  - `float`: regions are placed side by side, flowing to the right.  Their
    children are always laid out as `block`.
  - `block`: regions are hidden in a pop-out container which is only shown
    while the pointer is over the parent region (or the container itself).
    Children of a `block` region are again laid out as `block`, giving
    nested pop-outs.

Depths beyond the end of the configured list use `line`.
"""

import enum as _enum
import logging as _logging

_logger = _logging.getLogger(__name__)


class Strategy(_enum.Enum):
    LINE = "line"
    FLOAT = "float"
    BLOCK = "block"


class LayoutConfig():
    """The strategy to use at each depth.

    :param tags: Iterable of strategy names (`"line"`, `"float"`, `"block"`)
      or :class:`Strategy` members; entry `i` is used for depth `i`.  `None`
      means every depth is `line`.
    """
    def __init__(self, tags=None):
        self._strategies = []
        for tag in (tags or []):
            try:
                self._strategies.append(Strategy(tag))
            except ValueError:
                raise ValueError("Unknown layout strategy {!r}".format(tag)) from None

    @property
    def tags(self):
        """List of the configured strategy names."""
        return [s.value for s in self._strategies]

    def configured(self, depth):
        """The strategy configured for this depth, ignoring what the parent
        depth used."""
        if depth < len(self._strategies):
            return self._strategies[depth]
        return Strategy.LINE

    def strategy_for(self, depth, parent_strategy=None):
        """The strategy to use at this depth.

        :param depth: The depth, with the top level regions at depth 0.
        :param parent_strategy: The :class:`Strategy` used at the depth above,
          or `None` for the top level.
        """
        if parent_strategy in (Strategy.FLOAT, Strategy.BLOCK):
            return Strategy.BLOCK
        return self.configured(depth)

    def __repr__(self):
        return "LayoutConfig({!r})".format(self.tags)


class ViewNode():
    """One displayed region.  Only ever mirrors the index and selection.

    :param region_id: The id of the region.
    :param text: The label to display.
    :param depth: The depth, 0 for top level.
    :param strategy: The :class:`Strategy` this region is drawn with.
    :param parent: The parent :class:`ViewNode`, or `None`.
    """
    def __init__(self, region_id, text, depth, strategy, parent=None):
        self.region_id = region_id
        self.text = text
        self.depth = depth
        self.strategy = strategy
        self.parent = parent
        self.children = []
        # How the container of the children is drawn; `None` if no children
        self.children_strategy = None
        self.top_level = False
        self.alternate = False
        # Container ends with a boundary clearing the side-by-side flow
        self.clear_after = False
        self.label_z = None
        self.container_z = None
        # Set by :func:`fit`
        self.truncated = False
        self.anchor_right = False

    @property
    def pops_out(self):
        """Are the children in a hidden until hover container?"""
        return self.children_strategy == Strategy.BLOCK

    def walk(self):
        """Generate this node, and then all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self):
        return "ViewNode({!r}, {}, depth={})".format(self.region_id,
            self.strategy.value, self.depth)


class Composition():
    """Result of :meth:`Composer.compose`.

    :param roots: List of the top level :class:`ViewNode` instances.
    :param strategy: The :class:`Strategy` of the top level.
    """
    def __init__(self, roots, strategy):
        self.roots = roots
        self.strategy = strategy
        self.nodes = { node.region_id : node for node in self.walk() }

    def walk(self):
        for root in self.roots:
            yield from root.walk()

    def __getitem__(self, region_id):
        return self.nodes[region_id]

    def __len__(self):
        return len(self.nodes)


class Composer():
    """Walks an index, from the top level down, building :class:`ViewNode`
    trees.

    :param index: The :class:`region_tree.index.HierarchyIndex` to compose.
    :param layout: A :class:`LayoutConfig`, or an iterable of strategy names.
    :param z_index: The base stacking value.  Each pop-out is given two
      values (for the parent label and for the container) counting down from
      here, in the order the pop-outs are composed.
    """
    def __init__(self, index, layout=None, z_index=1000):
        if not isinstance(layout, LayoutConfig):
            layout = LayoutConfig(layout)
        self._index = index
        self._layout = layout
        self._z_index = z_index

    @property
    def layout(self):
        return self._layout

    def compose(self):
        """Compose the whole index.

        :return: Instance of :class:`Composition`.
        """
        self._next_z = self._z_index
        strategy = self._layout.strategy_for(0)
        roots = self._compose_level(self._index.top_level(), 0, None, strategy)
        composition = Composition(roots, strategy)
        _logger.debug("Composed %s regions with layout %s", len(composition), self._layout.tags)
        return composition

    def _take_z(self):
        z = self._next_z
        self._next_z -= 1
        return z

    def _compose_level(self, ids, depth, owner, strategy):
        if owner is not None:
            owner.children_strategy = strategy
            owner.clear_after = strategy != Strategy.LINE
            if strategy == Strategy.BLOCK:
                owner.label_z = self._take_z()
                owner.container_z = self._take_z()
        nodes = []
        for position, region_id in enumerate(ids):
            node = ViewNode(region_id, self._index.text(region_id), depth, strategy, owner)
            if strategy == Strategy.LINE:
                node.top_level = depth == 0
                node.alternate = depth > 0 and position % 2 == 1
            nodes.append(node)
            child_ids = self._index.children(region_id)
            if child_ids:
                child_strategy = self._layout.strategy_for(depth + 1, strategy)
                node.children = self._compose_level(child_ids, depth + 1, node, child_strategy)
        return nodes


def fit(nodes, measurer, width):
    """Post-composition pass, once the view has drawn the nodes.

      - Flags each label which is too wide for its space (`truncated`), so
        the view can offer the full text as a tooltip.
      - Shows each pop-out container in turn, and if it would extend past the
        available width, flags it to be anchored on the right instead of the
        left (`anchor_right`).  Nested pop-outs are handled after their
        ancestor has been anchored.

    :param nodes: Iterable of :class:`ViewNode` to process, typically the
      roots of a :class:`Composition`.
    :param measurer: Object with methods `label_overflows(node)`,
      `show(node)`, `container_right(node)`, `anchor(node)` and `hide(node)`.
    :param width: The available width.
    """
    for node in nodes:
        node.truncated = bool(measurer.label_overflows(node))
        if node.pops_out:
            measurer.show(node)
            try:
                node.anchor_right = measurer.container_right(node) > width
                measurer.anchor(node)
                fit(node.children, measurer, width)
            finally:
                measurer.hide(node)
        else:
            fit(node.children, measurer, width)
