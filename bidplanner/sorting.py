"""Selection sort and quick sort of bids by title, with an interactive menu."""

from __future__ import annotations

import sys
import time
from typing import MutableSequence, Optional, Sequence

from .bid import Bid, format_bid, load_bids
from .csvparser import CsvError

CLOCKS_PER_SEC = 1_000_000
DEFAULT_CSV = "eBid_Monthly_Sales.csv"


def partition(bids: MutableSequence[Bid], begin: int, end: int) -> int:
    """Hoare partition of ``bids[begin:end + 1]`` around the middle title."""
    low, high = begin, end
    pivot = bids[begin + (end - begin) // 2].title
    while True:
        while bids[low].title < pivot:
            low += 1
        while pivot < bids[high].title:
            high -= 1
        if low >= high:
            return high
        bids[low], bids[high] = bids[high], bids[low]
        low += 1
        high -= 1


def quick_sort(
    bids: MutableSequence[Bid], begin: int = 0, end: Optional[int] = None
) -> None:
    """Sort ``bids[begin:end + 1]`` in place by title."""
    if end is None:
        end = len(bids) - 1
    if begin >= end:
        return
    mid = partition(bids, begin, end)
    quick_sort(bids, begin, mid)
    quick_sort(bids, mid + 1, end)


def selection_sort(bids: MutableSequence[Bid]) -> None:
    """Sort ``bids`` in place by title using selection sort."""
    size = len(bids)
    for pos in range(size - 1):
        smallest = min(range(pos, size), key=lambda j: bids[j].title)
        if smallest != pos:
            bids[pos], bids[smallest] = bids[smallest], bids[pos]


def _report(started: float) -> None:
    elapsed = time.process_time() - started
    print(f"time: {int(elapsed * CLOCKS_PER_SEC)} clock ticks")
    print(f"time: {elapsed:g} seconds")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the bid sorting menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    csv_path = args[0] if len(args) == 1 else DEFAULT_CSV
    bids: list[Bid] = []

    choice = 0
    while choice != 9:
        print("Menu:")
        print("  1. Load Bids")
        print("  2. Display All Bids")
        print("  3. Selection Sort All Bids")
        print("  4. Quick Sort All Bids")
        print("  9. Exit")
        try:
            words = input("Enter choice: ").split()
        except EOFError:
            break
        try:
            choice = int(words[0]) if words else 0
        except ValueError:
            choice = 0

        if choice == 1:
            started = time.process_time()
            try:
                bids = load_bids(csv_path)
            except CsvError as error:
                print(error, file=sys.stderr)
            print(f"{len(bids)} bids read")
            _report(started)
        elif choice == 2:
            for bid in bids:
                print(format_bid(bid))
            print()
        elif choice == 3:
            started = time.process_time()
            selection_sort(bids)
            print(f"{len(bids)} bids sorted")
            _report(started)
        elif choice == 4:
            started = time.process_time()
            quick_sort(bids)
            print(f"{len(bids)} bids sorted")
            _report(started)

    print("Good bye.")
    return 0