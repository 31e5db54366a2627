"""
Demonstration Run
=================
Exercises a handful of the library's routines end to end and logs the
results.

Why is this file needed?
------------------------
It is the smoke test you can run by hand. It:
1. Configures logging for the ``algokit`` namespace.
2. Runs one representative call per area (dynamic programming, greedy,
   strings, probabilistic filters).
3. Times the whole run with :func:`algokit.dev.timer`.
"""
import logging

from algokit import config
from algokit.dev import timer
from algokit.dynamic import length_of_lis, min_coins
from algokit.greedy import can_complete_circuit
from algokit.logging_config import setup_logging
from algokit.probabilistic import XorFilter
from algokit.strings import from_roman, to_roman

logger = logging.getLogger(__name__)


@timer
def run_demo() -> dict[str, object]:
    results: dict[str, object] = {
        "min_coins": min_coins([1, 2, 5], 11),
        "length_of_lis": length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]),
        "can_complete_circuit": can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]),
        "roman_round_trip": all(from_roman(to_roman(n)) == n for n in range(1, 4000)),
    }

    words = [f"item-{i}" for i in range(1000)]
    xor = XorFilter.from_items(words)
    results["xor_all_members_found"] = all(w in xor for w in words)
    results["xor_bytes"] = xor.size_in_bytes

    for name, value in results.items():
        logger.info(f"{name}: {value}")
    return results


def main() -> None:
    setup_logging(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    run_demo()


if __name__ == "__main__":
    main()
