"""The implementation of collections (multisets) of data and functional operations over collections.
"""

import logging
from collections import defaultdict

from entry import Entry
from errors import FixpointNotReached
from settings import get_settings

logger = logging.getLogger(__name__)


def _identity(record):
    return record


class Collection:
    """A multiset of data.

    Stored as a list of (record, multiplicity) entries which is not required to
    be normalized: a record may appear in several entries and its effective
    multiplicity is the sum over all of them.
    """

    def __init__(self, entries=None):
        if entries is None:
            entries = []
        self._inner = [Entry.of(entry) for entry in entries]

    def __repr__(self):
        return f"Collection({self._inner})"

    def __len__(self):
        return len(self._inner)

    def __iter__(self):
        return iter(self._inner)

    def __eq__(self, other):
        """Multiset equality, independent of the order of the entries."""
        if not isinstance(other, Collection):
            return NotImplemented
        return self._sorted() == other._sorted()

    __hash__ = None

    def _sorted(self):
        return sorted(self._inner, key=Entry.sort_key)

    def entries(self):
        return list(self._inner)

    def multiplicity_of(self, record):
        """The net multiplicity of a record, summed across all of its entries."""
        return sum(
            multiplicity for (data, multiplicity) in self._inner if data == record
        )

    def concat(self, other):
        """Concatenate two collections together."""
        out = []
        out.extend(self._inner)
        out.extend(other._inner)
        return Collection(out)

    def negate(self):
        return Collection([entry.negate() for entry in self._inner])

    def map(self, f):
        """Apply a function to all entries in the collection.

        f receives an Entry and returns an Entry or a (record, multiplicity) pair.
        """
        return Collection([Entry.of(f(entry)) for entry in self._inner])

    def map_records(self, f):
        """Apply a function to all records in the collection."""
        return Collection(
            [(f(data), multiplicity) for (data, multiplicity) in self._inner]
        )

    def filter(self, f):
        """Filter out entries for which a function f(entry) evaluates to False."""
        return Collection([entry for entry in self._inner if f(entry)])

    def filter_records(self, f):
        """Filter out records for which a function f(record) evaluates to False."""
        return Collection([entry for entry in self._inner if f(entry.record)])

    def reduce(self, f, key=None):
        """Apply a reduction function to the entries of each group.

        Entries are grouped by key(record), or by the record itself when no key
        function is given. f receives the list of (record, multiplicity) entries
        of one group, unsummed and in input order, and returns zero or more
        (record, multiplicity) pairs. The output is sorted by record, then
        multiplicity.
        """
        if key is None:
            key = _identity
        groups = defaultdict(list)
        for entry in self._inner:
            groups[key(entry.record)].append(entry)
        out = []
        for vals in groups.values():
            out.extend(Entry.of(result) for result in f(vals))
        out.sort(key=Entry.sort_key)
        return Collection(out)

    def count(self):
        """Count the number of entries for each record in the collection."""

        def count_inner(vals):
            return [(vals[0].record, len(vals))]

        return self.reduce(count_inner)

    def sum(self):
        """Produce the total multiplicity of each record in the collection."""

        def sum_inner(vals):
            out = 0
            for (_, multiplicity) in vals:
                out += multiplicity
            return [(vals[0].record, out)]

        return self.reduce(sum_inner)

    def distinct(self):
        """Reduce the collection to a set of elements (from a multiset).

        Every record present in the input appears exactly once with multiplicity
        one, whatever its multiplicities were.
        """

        def distinct_inner(vals):
            return [(vals[0].record, 1)]

        return self.reduce(distinct_inner)

    def consolidate(self):
        """Produce as output a collection that is logically equivalent to the input
        but which combines identical instances of the same record into one
        (record, multiplicity) pair.

        Records whose multiplicities cancel out are dropped.
        """

        def consolidate_inner(vals):
            out = 0
            for (_, multiplicity) in vals:
                out += multiplicity
            if out == 0:
                return []
            return [(vals[0].record, out)]

        return self.reduce(consolidate_inner)

    def min(self, key=None):
        """Produce the minimum record within each group of the collection.

        Note that no record may have negative multiplicity when computing the min,
        as it is unclear what exactly the minimum record is in that case.
        """

        def min_inner(vals):
            vals = _consolidate_values(vals)
            if len(vals) == 0:
                return []
            return [(min(vals), 1)]

        return self.reduce(min_inner, key=key)

    def max(self, key=None):
        """Produce the maximum record within each group of the collection.

        Note that no record may have negative multiplicity when computing the max,
        as it is unclear what exactly the maximum record is in that case.
        """

        def max_inner(vals):
            vals = _consolidate_values(vals)
            if len(vals) == 0:
                return []
            return [(max(vals), 1)]

        return self.reduce(max_inner, key=key)

    def join(self, other):
        """Match entries with equal records in the two input collections and
        produce (record, m1 * m2) for every matching pair.
        """
        index = defaultdict(list)
        for (data, multiplicity) in other._inner:
            index[data].append(multiplicity)
        out = []
        for (data, m1) in self._inner:
            for m2 in index.get(data, ()):
                out.append((data, m1 * m2))
        return Collection(out)

    def iterate(self, f, max_iterations=None):
        """Repeatedly invoke a function f on a collection, and return the result
        of applying the function an infinite number of times (fixedpoint).

        max_iterations bounds the number of calls to f. When it is None the
        limit comes from settings (MULTISET_MAX_ITERATIONS), so an environment
        limit also applies to calls that pass no limit of their own.

        Note that if the function does not converge to a fixedpoint and no round
        limit is set, either here or through settings, this will run forever.
        """
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        if max_iterations is None:
            max_iterations = get_settings().max_iterations
        curr = Collection(self._inner)
        rounds = 0
        while True:
            if max_iterations is not None and rounds >= max_iterations:
                logger.warning(
                    "iterate stopped after %d rounds without reaching a fixed point",
                    rounds,
                )
                raise FixpointNotReached(rounds, curr)
            result = f(curr)
            rounds += 1
            logger.debug("iterate round %d produced %d entries", rounds, len(result))
            if result == curr:
                break
            curr = result
        logger.info("iterate reached a fixed point after %d rounds", rounds)
        return curr


def _consolidate_values(vals):
    consolidated = defaultdict(int)
    for (data, multiplicity) in vals:
        consolidated[data] += multiplicity
    out = []
    for (data, multiplicity) in consolidated.items():
        if multiplicity == 0:
            continue
        if multiplicity < 0:
            raise ValueError(f"record {data!r} has negative multiplicity {multiplicity}")
        out.append(data)
    return out
