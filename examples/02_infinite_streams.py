from __future__ import annotations

import random

from _infra import banner, run

from seqkit import Stream


def main() -> None:
    banner("02_infinite_streams: lazy pipelines over unbounded input")

    naturals = Stream.iterate(1, lambda i: i + 1)

    squares_of_odds = naturals.filter(lambda i: i % 2 == 1).map(lambda i: i * i)
    print("first odd squares:", squares_of_odds.take(5).to_list())

    # Only the windows we look at are ever built.
    for window in naturals.sliding(3).take(3):
        print("window:", window.to_list())

    labelled = Stream.of("a", "b", "c").cycle().zip_with_index().take(7)
    print("cycled:", labelled.to_list())

    rolls = Stream.continually(lambda: random.randint(1, 6))
    print("rolls until a six:", rolls.take_while(lambda r: r != 6).take(20).to_list())

    # Realised prefix only; the rest prints as '?'.
    print(naturals.take(3))


if __name__ == "__main__":
    run(main)
