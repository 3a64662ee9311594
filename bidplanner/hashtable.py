"""A chained hash table of bids keyed by numeric bid id, with an interactive menu."""

from __future__ import annotations

import re
import sys
import time
from typing import Iterator, Optional, Sequence

from .bid import Bid, bid_from_row, format_bid
from .csvparser import CsvError, Parser

DEFAULT_SIZE = 179
DEFAULT_CSV = "eBid_Monthly_Sales.csv"
DEFAULT_BID_KEY = "98223"
CLOCKS_PER_SEC = 1_000_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read the leading integer of ``text`` the way C's atoi does, or 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class HashTable:
    """Hash table with separate chaining; each bucket keeps bids in insertion order."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._size = size
        self._buckets: list[list[Bid]] = [[] for _ in range(size)]

    def size(self) -> int:
        """Number of buckets in the table."""
        return self._size

    def hash(self, key: int) -> int:
        """Bucket index for an integer key, treating it as a 32-bit unsigned value."""
        return (key & 0xFFFFFFFF) % self._size

    def _bucket_for(self, bid_id: str) -> list[Bid]:
        return self._buckets[self.hash(_atoi(bid_id))]

    def insert(self, bid: Bid) -> None:
        """Add a bid to the end of its bucket's chain."""
        self._bucket_for(bid.bid_id).append(bid)

    def remove(self, bid_id: str) -> None:
        """Remove the first bid with ``bid_id``; do nothing if there is none."""
        bucket = self._bucket_for(bid_id)
        for index, bid in enumerate(bucket):
            if bid.bid_id == bid_id:
                del bucket[index]
                return

    def search(self, bid_id: str) -> Optional[Bid]:
        """The first bid with ``bid_id``, or None."""
        return next(
            (bid for bid in self._bucket_for(bid_id) if bid.bid_id == bid_id), None
        )

    def __iter__(self) -> Iterator[Bid]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def format_all(self) -> list[str]:
        """Display lines for every bid, bucket by bucket."""
        lines: list[str] = []
        for key, bucket in enumerate(self._buckets):
            if not bucket:
                continue
            head, *chain = bucket
            lines.append(f"Key {key}: {head.bid_id} | {head.title} | {head.fund}")
            lines.extend(
                f"Key    {key}: {bid.bid_id} | {bid.title} | {bid.amount:g} | {bid.fund}"
                for bid in chain
            )
        return lines

    def print_all(self) -> None:
        """Print every bid in the table."""
        for line in self.format_all():
            print(line)


def _load_bids(csv_path: str, table: HashTable) -> None:
    print(f"Loading CSV file {csv_path}")
    parser = Parser(csv_path)
    print("".join(f"{name} | " for name in parser.header()))
    try:
        for row in parser:
            table.insert(bid_from_row(row))
    except CsvError as error:
        print(error, file=sys.stderr)


def _report(started: float) -> None:
    elapsed = time.process_time() - started
    print(f"time: {int(elapsed * CLOCKS_PER_SEC)} clock ticks")
    print(f"time: {elapsed:g} seconds")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the hash table menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        csv_path, bid_key = args[0], DEFAULT_BID_KEY
    elif len(args) == 2:
        csv_path, bid_key = args
    else:
        csv_path, bid_key = DEFAULT_CSV, DEFAULT_BID_KEY

    table = HashTable()

    choice = 0
    while choice != 9:
        print("Menu:")
        print("  1. Load Bids")
        print("  2. Display All Bids")
        print("  3. Find Bid")
        print("  4. Remove Bid")
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
                _load_bids(csv_path, table)
            except CsvError as error:
                print(error, file=sys.stderr)
            _report(started)
        elif choice == 2:
            table.print_all()
        elif choice == 3:
            started = time.process_time()
            bid = table.search(bid_key)
            if bid is not None and bid.bid_id:
                print(format_bid(bid))
            else:
                print(f"Bid Id {bid_key} not found.")
            _report(started)
        elif choice == 4:
            table.remove(bid_key)

    print("Good bye.")
    return 0