"""A singly linked list of bids, with an interactive menu."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .bid import Bid, format_bid, load_bids, prompt_bid
from .csvparser import CsvError

DEFAULT_CSV = "eBid_Monthly_Sales.csv"
DEFAULT_BID_KEY = "98109"
CLOCKS_PER_SEC = 1_000_000


@dataclass
class _Node:
    bid: Bid
    next: Optional[_Node] = None


class LinkedList:
    """Bids kept in a singly linked chain with head and tail references."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def append(self, bid: Bid) -> None:
        """Add a bid to the end of the list."""
        node = _Node(bid)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, bid: Bid) -> None:
        """Add a bid to the start of the list."""
        node = _Node(bid, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def remove(self, bid_id: str) -> None:
        """Remove the first bid with ``bid_id``; do nothing if there is none."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None:
            if current.bid.bid_id == bid_id:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                if current is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous, current = current, current.next

    def search(self, bid_id: str) -> Optional[Bid]:
        """The first bid with ``bid_id``, or None."""
        return next((bid for bid in self if bid.bid_id == bid_id), None)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Bid]:
        node = self._head
        while node is not None:
            yield node.bid
            node = node.next

    def print_list(self) -> None:
        """Print every bid in list order."""
        for bid in self:
            print(format_bid(bid))


def _report(started: float, unit: str) -> None:
    elapsed = time.process_time() - started
    print(f"time: {int(elapsed * CLOCKS_PER_SEC)} {unit}")
    print(f"time: {elapsed:g} seconds")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the linked list menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        csv_path, bid_key = args[0], DEFAULT_BID_KEY
    elif len(args) == 2:
        csv_path, bid_key = args
    else:
        csv_path, bid_key = DEFAULT_CSV, DEFAULT_BID_KEY

    bid_list = LinkedList()

    choice = 0
    while choice != 9:
        print("Menu:")
        print("  1. Enter a Bid")
        print("  2. Load Bids")
        print("  3. Display All Bids")
        print("  4. Find Bid")
        print("  5. Remove Bid")
        print("  9. Exit")
        try:
            words = input("Enter choice: ").split()
        except EOFError:
            break
        try:
            choice = int(words[0]) if words else 0
        except ValueError:
            choice = 0

        try:
            if choice == 1:
                bid = prompt_bid()
                bid_list.append(bid)
                print(format_bid(bid))
            elif choice == 2:
                started = time.process_time()
                try:
                    for bid in load_bids(csv_path):
                        bid_list.append(bid)
                except CsvError as error:
                    print(error, file=sys.stderr)
                print(f"{len(bid_list)} bids read")
                _report(started, "milliseconds")
            elif choice == 3:
                bid_list.print_list()
            elif choice == 4:
                started = time.process_time()
                found = bid_list.search(bid_key)
                if found is not None and found.bid_id:
                    print(format_bid(found))
                else:
                    print(f"Bid Id {bid_key} not found.")
                _report(started, "clock ticks")
            elif choice == 5:
                bid_list.remove(bid_key)
        except EOFError:
            break

    print("Good bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())