"""The implementation of (record, multiplicity) pairs, the elements of a collection.
"""


class Entry:
    """An immutable (record, multiplicity) pair.

    Records may be any totally ordered, hashable value. The multiplicity is a
    signed integer: positive values are insertions, negative values are
    retractions, and zero means the record is logically absent.

    Entries are equal when both the record and the multiplicity are equal, but
    they are ordered by record alone.
    """

    __slots__ = ("_record", "_multiplicity")

    def __init__(self, record, multiplicity):
        if isinstance(multiplicity, bool) or not isinstance(multiplicity, int):
            raise TypeError(
                f"multiplicity must be an int, got {type(multiplicity).__name__}"
            )
        object.__setattr__(self, "_record", record)
        object.__setattr__(self, "_multiplicity", multiplicity)

    @classmethod
    def of(cls, value):
        """Coerce an Entry or a (record, multiplicity) sequence into an Entry."""
        if isinstance(value, cls):
            return value
        try:
            (record, multiplicity) = value
        except (TypeError, ValueError):
            raise ValueError(
                f"expected a (record, multiplicity) pair, got {value!r}"
            ) from None
        return cls(record, multiplicity)

    @property
    def record(self):
        return self._record

    @property
    def multiplicity(self):
        return self._multiplicity

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        return f"Entry({self._record!r}, {self._multiplicity})"

    def __iter__(self):
        yield self._record
        yield self._multiplicity

    def __eq__(self, other):
        if isinstance(other, Entry):
            return (
                self._record == other._record
                and self._multiplicity == other._multiplicity
            )
        if isinstance(other, tuple) and len(other) == 2:
            return self._record == other[0] and self._multiplicity == other[1]
        return NotImplemented

    def __hash__(self):
        return hash((self._record, self._multiplicity))

    # Ordering only looks at the record.
    def __lt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._record < other._record

    def __le__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._record <= other._record

    def __gt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._record > other._record

    def __ge__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._record >= other._record

    def sort_key(self):
        """Key for deterministic sorting, with multiplicity as the tie-break."""
        return (self._record, self._multiplicity)

    def negate(self):
        return Entry(self._record, -self._multiplicity)
