"""Minimal example showing construction, mutation and the combinators."""

from __future__ import annotations

from sentinel_array import (
    Generator,
    append,
    create_array,
    find,
    find_all,
    get_length,
    insert,
    map,
    reduce,
    remove,
)


def main() -> None:
    squares = create_array(5, Generator(lambda i: i * i))
    print("Squares:", squares.to_list())

    insert(squares, 1, 0)
    append(squares, 36)
    result = remove(squares, 3)
    print("After mutation:", squares.to_list(), "removed:", result.value)
    print("Length:", get_length(squares))

    failed = insert(squares, get_length(squares) + 2, 99)
    print("Out-of-range insert:", bool(failed), failed.reason)

    doubled = map(squares, lambda v: v * 2)
    print("Doubled:", doubled.to_list())
    print("Sum:", reduce(squares, lambda acc, v: acc + v, 0))
    print("First > 10 at index:", find(squares, lambda v: v > 10))
    print("Evens:", find_all(squares, lambda v: v % 2 == 0).to_list())


if __name__ == "__main__":
    main()
