"""Bid records and loading them from the monthly sales CSV."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from .csvparser import CsvError, Parser, Row

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class Bid:
    """A single auction bid."""

    bid_id: str = ""
    title: str = ""
    fund: str = ""
    amount: float = 0.0


def str_to_double(text: str, ch: str) -> float:
    """Strip every ``ch`` from ``text`` and read the leading number, or 0.0."""
    cleaned = text.replace(ch, "")
    match = _FLOAT_PREFIX.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(1))


def format_bid(bid: Bid) -> str:
    """One-line display form of a bid."""
    return f"{bid.bid_id}: {bid.title} | {bid.amount:g} | {bid.fund}"


def bid_from_row(row: Row) -> Bid:
    """Build a bid from a sales CSV row (title, id, ..., amount at 4, fund at 8)."""
    return Bid(
        bid_id=row[1],
        title=row[0],
        fund=row[8],
        amount=str_to_double(row[4], "$"),
    )


def load_bids(csv_path: str) -> list[Bid]:
    """Read every bid in the CSV file, stopping at the first unreadable row."""
    print(f"Loading CSV file {csv_path}")
    parser = Parser(csv_path)
    bids: list[Bid] = []
    try:
        for row in parser:
            bids.append(bid_from_row(row))
    except CsvError as error:
        print(error, file=sys.stderr)
    return bids


def prompt_bid(read: Optional[Callable[[str], str]] = None) -> Bid:
    """Ask for a bid's fields; the fund keeps only its first word."""
    ask = read if read is not None else input
    bid_id = ask("Enter Id: ")
    title = ask("Enter title: ")
    fund_words = ask("Enter fund: ").split()
    amount = ask("Enter amount: ")
    return Bid(
        bid_id=bid_id,
        title=title,
        fund=fund_words[0] if fund_words else "",
        amount=str_to_double(amount, "$"),
    )