import pytest

from bidplanner.bid import Bid, bid_from_row, format_bid, load_bids, prompt_bid, str_to_double
from bidplanner.csvparser import CsvError, DataType, Parser

HEADER = "Title,ArticleID,Dept,CloseDate,WinningBid,InventoryID,VehicleID,Receipt,Fund"


def test_str_to_double_strips_character():
    assert str_to_double("$12.50", "$") == 12.5
    assert str_to_double("abc", "$") == 0.0


def test_str_to_double_reads_leading_prefix():
    assert str_to_double("$3x", "$") == 3.0


def test_default_bid():
    bid = Bid()
    assert (bid.bid_id, bid.title, bid.fund, bid.amount) == ("", "", "", 0.0)


def test_format_bid():
    assert format_bid(Bid("7", "Lamp", "General", 2.5)) == "7: Lamp | 2.5 | General"


def test_bid_from_row():
    parser = Parser(f"{HEADER}\nTable,98109,D,1/1,$40.25,I,V,R,Enterprise\n", DataType.PURE)
    bid = bid_from_row(parser[0])
    assert bid == Bid("98109", "Table", "Enterprise", 40.25)


def test_load_bids(tmp_path):
    path = tmp_path / "bids.csv"
    path.write_text(
        f"{HEADER}\n"
        "Table,100,D,1/1,$4,I,V,R,General\n"
        '"Chair, red",101,D,1/1,$6,I,V,R,Enterprise\n'
    )
    bids = load_bids(str(path))
    assert [b.bid_id for b in bids] == ["100", "101"]
    assert bids[1].title == '"Chair, red"'
    assert bids[1].amount == 6.0


def test_load_bids_missing_file(tmp_path):
    with pytest.raises(CsvError):
        load_bids(str(tmp_path / "nothing.csv"))


def test_prompt_bid():
    answers = iter(["98109", "Office Chair", "General Fund", "$25"])
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    bid = prompt_bid(read)
    assert bid.bid_id == "98109"
    assert bid.title == "Office Chair"
    assert bid.fund == "General"
    assert bid.amount == 25.0
    assert prompts == ["Enter Id: ", "Enter title: ", "Enter fund: ", "Enter amount: "]