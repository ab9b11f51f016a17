import logging

from collection import Collection
from entry import Entry
from settings import get_settings


def add_one(collection):
    return (
        collection.map_records(lambda data: data + 1)
        .concat(collection)
        .filter_records(lambda data: data <= 5)
        .distinct()
    )


def main():
    logging.basicConfig(level=get_settings().log_level)

    a = Collection([("apple", 1), ("orange", 1)])
    b = Collection([("apple", 4), ("pear", 1)])
    c = Collection([(("apple", "$5"), 2), (("banana", "$2"), 1), (("apple", "$2"), 20)])
    e = Collection([(1, 1)])

    print(a.concat(b))
    print(a.concat(b.negate()))
    print(a.concat(b).map(lambda entry: Entry(entry.record.upper(), entry.multiplicity)))
    print(a.concat(b).filter(lambda entry: entry.multiplicity > 1))
    print(a.concat(b).count())
    print(a.concat(b).sum())
    print(a.concat(b).distinct())
    print(a.concat(b).concat(a.negate()).consolidate())
    print(a.join(b))
    print(c.min(key=lambda data: data[0]))
    print(c.max(key=lambda data: data[0]))

    result = e.iterate(add_one).map_records(lambda data: (data, data * data))
    print(result)


if __name__ == "__main__":
    main()
