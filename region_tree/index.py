"""
index
~~~~~

Builds the two indices everything else works from:

  - The "content" index: region id -> the record's display attributes, which
    is the record less its parent id and children fields.
  - The "relation" index: region id -> :class:`Relation` giving the parent id
    and the ordered list of child ids.

Input records come in one of two shapes:

  - "Flat": a list of records, each naming its parent, e.g.

        [ {"id": 1, "pid": None, "text": "A"},
          {"id": 2, "pid": 1, "text": "B"} ]

  - "Nested": a list of records each holding a list of its children, e.g.

        [ {"id": 1, "text": "A", "child": [ {"id": 2, "text": "B"} ]} ]

The shape is decided from the first record only; see :func:`detect_shape`.

The top level regions are the children of the reserved :data:`ROOT` entry.
Ids are only ever stored as plain values: no entry holds a reference to
another entry.
"""

import collections.abc as _abc
import enum as _enum
import logging as _logging

from region_tree.errors import RegionNotFoundError, MalformedHierarchyError
from region_tree.keys import map_keys

_logger = _logging.getLogger(__name__)


class _Root():
    """Type of the :data:`ROOT` sentinel."""
    def __repr__(self):
        return "ROOT"


ROOT = _Root()
"""The parent of every top level region.  Distinct from `None`, which is
used to mean "no parent known"."""


class Shape(_enum.Enum):
    FLAT = "flat"
    NESTED = "nested"
    UNRECOGNISED = "unrecognised"


def detect_shape(record, keys):
    """Decide the shape of a data set from its first record.

      - Nested if the record has a children field but no parent field.
      - Flat if the record has no children field, or has a parent which is
        not `None`.
      - Otherwise (or if the record is not a mapping) unrecognised.

    :param record: The first record of the data set.
    :param keys: Instance of :class:`region_tree.keys.MapKeys`.

    :return: Member of :class:`Shape`.
    """
    if not isinstance(record, _abc.Mapping):
        return Shape.UNRECOGNISED
    has_children = keys.child in record
    if has_children and keys.pid not in record:
        return Shape.NESTED
    if not has_children or record[keys.pid] is not None:
        return Shape.FLAT
    return Shape.UNRECOGNISED


class Relation():
    """Position of one region in the tree.

    :param parent_id: The id of the parent, :data:`ROOT` for a top level
      region, or `None` if the parent is not known.
    """
    def __init__(self, parent_id=None):
        self.parent_id = parent_id
        self.child_ids = []

    def __repr__(self):
        return "Relation(parent_id={!r}, child_ids={!r})".format(self.parent_id,
            self.child_ids)


class HierarchyIndex():
    """Content and relation indices of one data set.

    :param keys: Optional field name overrides, passed to
      :func:`region_tree.keys.map_keys`.
    """
    def __init__(self, keys=None):
        self._keys = map_keys(keys)
        self.clear()

    @property
    def keys(self):
        """The :class:`region_tree.keys.MapKeys` in use."""
        return self._keys

    def clear(self):
        """Forget all regions."""
        self._content = dict()
        self._relations = {ROOT : Relation(None)}

    def ingest(self, records, parent_id=None):
        """Add the records to the index.  Either every record is added, or, if
        an exception is raised, the index is left unchanged.

        :param records: List of records, flat or nested.  Empty or `None` does
          nothing.
        :param parent_id: If not `None`, the id of an existing region; its
          current children (and their descendants) are replaced by the
          records.  Flat records which do not declare a parent are attached
          to this region.

        :return: The :class:`Shape` detected, or `None` if there was nothing
          to ingest.
        """
        if not records:
            return None
        records = list(records)
        if parent_id is not None and parent_id not in self._content:
            raise RegionNotFoundError(parent_id)
        attach_to = ROOT if parent_id is None else parent_id

        shape = detect_shape(records[0], self._keys)
        if shape == Shape.UNRECOGNISED:
            _logger.warning("Cannot detect flat or nested data from first record %r; ignoring %s records",
                records[0], len(records))
            return shape

        content, relations = self._snapshot()
        try:
            if parent_id is not None:
                self._drop_descendants(parent_id)
            if shape == Shape.NESTED:
                self._relations[attach_to].child_ids = []
                self._ingest_nested(records, attach_to)
            else:
                self._ingest_flat(records, attach_to)
        except Exception:
            self._content, self._relations = content, relations
            raise
        _logger.debug("Ingested %s %s records below %r", len(records), shape.value, attach_to)
        return shape

    def _snapshot(self):
        relations = dict()
        for region_id, relation in self._relations.items():
            copy = Relation(relation.parent_id)
            copy.child_ids = list(relation.child_ids)
            relations[region_id] = copy
        return dict(self._content), relations

    def _store(self, record):
        if not isinstance(record, _abc.Mapping):
            raise MalformedHierarchyError("Expected a record, not {!r}".format(record))
        try:
            region_id = record[self._keys.id]
        except KeyError:
            raise MalformedHierarchyError("Record {!r} has no '{}' field".format(
                record, self._keys.id)) from None
        if region_id in self._content:
            raise MalformedHierarchyError("Duplicate region id {!r}".format(region_id))
        structural = (self._keys.pid, self._keys.child)
        self._content[region_id] = { key : value for key, value in record.items()
            if key not in structural }
        return region_id

    def _relation_for(self, region_id):
        # Parents may be referred to before (or without) being seen
        relation = self._relations.get(region_id)
        if relation is None:
            relation = Relation(None)
            self._relations[region_id] = relation
        return relation

    def _ingest_flat(self, records, default_parent):
        for record in records:
            region_id = self._store(record)
            parent_id = record.get(self._keys.pid)
            if parent_id is None:
                parent_id = default_parent
            self._relation_for(region_id).parent_id = parent_id
            self._relation_for(parent_id).child_ids.append(region_id)

    def _ingest_nested(self, records, parent_id):
        siblings = self._relations[parent_id].child_ids
        for record in records:
            region_id = self._store(record)
            siblings.append(region_id)
            self._relations[region_id] = Relation(parent_id)
            children = record.get(self._keys.child)
            if children:
                self._ingest_nested(children, region_id)

    def _drop_descendants(self, region_id):
        for descendant in list(self.descendants(region_id)):
            self._content.pop(descendant, None)
            self._relations.pop(descendant, None)
        self._relations[region_id].child_ids = []

    def __contains__(self, region_id):
        return region_id in self._content

    def __len__(self):
        return len(self._content)

    def ids(self):
        """List of the ids of all regions, in the order they were ingested."""
        return list(self._content)

    def content(self, region_id):
        """The display attributes of the region, as a dictionary."""
        try:
            return self._content[region_id]
        except KeyError:
            raise RegionNotFoundError(region_id) from None

    def text(self, region_id):
        """The label of the region, or `None`."""
        return self.content(region_id).get(self._keys.text)

    def relation(self, region_id):
        """The :class:`Relation` of the region.  Use :data:`ROOT` to find the
        top level regions."""
        try:
            return self._relations[region_id]
        except KeyError:
            raise RegionNotFoundError(region_id) from None

    def parent(self, region_id):
        return self.relation(region_id).parent_id

    def children(self, region_id):
        """Ordered list of the ids of the children."""
        return list(self.relation(region_id).child_ids)

    def top_level(self):
        return self.children(ROOT)

    def descendants(self, region_id):
        """Generate the ids of all descendants of the region, depth first,
        children in order.  The region itself is not included.

        :raises MalformedHierarchyError: If a cycle is found.
        """
        seen = {region_id}
        stack = list(reversed(self.relation(region_id).child_ids))
        while stack:
            child_id = stack.pop()
            if child_id in seen:
                raise MalformedHierarchyError("Cycle through region {!r}".format(child_id))
            seen.add(child_id)
            yield child_id
            relation = self._relations.get(child_id)
            if relation is not None:
                stack.extend(reversed(relation.child_ids))

    def ancestors(self, region_id):
        """Generate the ids of the known ancestors of the region, nearest
        first.  Stops at :data:`ROOT` or at a parent which was never ingested.

        :raises MalformedHierarchyError: If a cycle is found.
        """
        seen = {region_id}
        parent_id = self.relation(region_id).parent_id
        while parent_id is not ROOT and parent_id in self._content:
            if parent_id in seen:
                raise MalformedHierarchyError("Cycle through region {!r}".format(parent_id))
            seen.add(parent_id)
            yield parent_id
            parent_id = self._relations[parent_id].parent_id
