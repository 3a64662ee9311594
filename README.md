# bidplanner

Small interactive console tools. Three of them load auction bids from a CSV
file and keep them in a list, a singly linked list or a chained hash table.
The fourth is a course planner that keeps courses in a binary search tree.

## Installation

    pip install .

## Commands

Each bid tool takes an optional CSV path (default `eBid_Monthly_Sales.csv`)
and shows a numbered menu. Enter `9` to exit. Input that is not a number is
treated as no choice, and the menu is shown again.

- `bid-sorting [CSV]` loads bids into a list and displays them. It sorts them
  by title with selection sort or with quick sort, and reports the CPU time
  each step takes.
- `bid-linkedlist [CSV] [BID_ID]` keeps bids in a singly linked list. You can
  enter a bid by hand (id, title, fund and amount), load the CSV, display all
  bids, and find or remove a bid. The bid id that is found and removed is
  given on the command line and defaults to `98109`.
- `bid-hashtable [CSV] [BID_ID]` keeps bids in a chained hash table with 179
  buckets. Loading prints the CSV header. You can display every bid bucket by
  bucket, and find or remove a bid. The bid id defaults to `98223`.
- `course-planner` loads a course file, prints all courses in course-number
  order, or looks up one course with its prerequisites.
  - Each line of the course file is `NUMBER,Title,PREREQ,...`.
  - Lines with fewer than two fields are reported and skipped.
  - If you enter an empty path, the file `CS 300 ABCU_Advising_Program_Input.csv`
    is used.
  - The course number you look up is converted to upper case before the
    search.
  - A course number that is already in the tree is not added again.

Bid CSV files need a header line. The tools read these columns:

| Column | Field | Notes |
|--------|-------|-------|
| 0 | title | |
| 1 | bid id | |
| 4 | amount | every `$` is removed and the leading number is read |
| 8 | fund | |

Loading stops at the first row that lacks these columns.

## Library use

    from bidplanner.csvparser import Parser, DataType, CsvError
    from bidplanner.bid import Bid, load_bids, format_bid, str_to_double
    from bidplanner.sorting import quick_sort, selection_sort
    from bidplanner.hashtable import HashTable
    from bidplanner.linkedlist import LinkedList
    from bidplanner.courses import BinarySearchTree, Course, load_courses, format_course

    bids = load_bids("eBid_Monthly_Sales.csv")
    quick_sort(bids)                 # or quick_sort(bids, 0, len(bids) - 1)

    table = HashTable()
    for bid in bids:
        table.insert(bid)
    found = table.search("98223")   # a Bid, or None

    bst = BinarySearchTree()
    load_courses("courses.csv", bst) # returns the number of courses read
    print(format_course(bst.search("CSCI100")))

`Parser(data, data_type=DataType.FILE, sep=",")` reads a CSV file, or CSV
text when you pass `DataType.PURE`.

- Rows can be indexed by position or by column name. `Row.get_value(pos, kind)`
  converts a value.
- Rows can be added with `add_row` and removed with `delete_row`.
- `sync()` writes the data back to the file it came from.
- Errors are raised as `CsvError`. Their messages start with `CSVparser : `.

`LinkedList` and `HashTable` both provide `insert`/`append`, `search` and
`remove`, and both can be iterated. `BinarySearchTree` yields its courses in
course-number order.

## Limitations

The command-line tools keep bids and courses in memory only. Changes made
from the menus, such as entered or removed bids, are not saved to any file.

## Tests

    pip install .[test]
    pytest