from __future__ import annotations

import threading

from underbelt import (
    delay,
    defaults,
    filter_,
    flatten,
    memoize,
    once,
    pluck,
    reduce_,
    sort_by,
    uniq,
    zip_,
)

PEOPLE = [
    {"name": "moe", "age": 40, "tags": ["stooge", "leader"]},
    {"name": "larry", "age": 50, "tags": ["stooge"]},
    {"name": "curly", "age": 40, "tags": ["stooge", "nyuk"]},
]


@memoize
def slow_square(n: int) -> int:
    print(f"computing {n}^2")
    return n * n


def main() -> None:
    by_age = sort_by(PEOPLE, "age")
    print("By age:", pluck(by_age, "name"))
    print("Over 45:", pluck(filter_(PEOPLE, lambda p: p["age"] > 45), "name"))
    print("Total age:", reduce_(pluck(PEOPLE, "age"), lambda acc, age: acc + age))
    print("Tags:", uniq(flatten(pluck(PEOPLE, "tags"))))
    print("Pairs:", zip_(pluck(PEOPLE, "name"), [1, 2]))
    print("Options:", defaults({"color": None}, {"color": "red", "size": "L"}))

    print(slow_square(12), slow_square(12))

    init = once(lambda: print("initialised") or "ready")
    print(init(), init())

    done = threading.Event()
    delay(lambda msg: (print(msg), done.set()), 100, "delayed hello")
    done.wait(1)


if __name__ == "__main__":
    main()
