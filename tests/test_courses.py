from bidplanner.courses import (
    BinarySearchTree,
    Course,
    format_course,
    load_courses,
    main,
    split,
    trim,
)


def test_trim_strips_whitespace():
    assert trim("  CSCI100 \t\r\n") == "CSCI100"
    assert trim("a b") == "a b"


def test_trim_all_whitespace_unchanged():
    assert trim("   ") == "   "
    assert trim("") == ""


def test_split_drops_empty_tokens():
    assert split("CSCI300, Intro ,,CSCI200,", ",") == ["CSCI300", "Intro", "CSCI200"]


def test_split_no_delimiter():
    assert split("single", ",") == ["single"]


def test_bst_iterates_in_order():
    bst = BinarySearchTree()
    for number in ["MATH201", "CSCI100", "CSCI400", "CSCI200"]:
        bst.insert(Course(number, number.lower()))
    numbers = [c.course_number for c in bst]
    assert numbers == sorted(numbers)
    assert len(numbers) == 4


def test_bst_duplicate_ignored():
    bst = BinarySearchTree()
    bst.insert(Course("CSCI100", "First"))
    bst.insert(Course("CSCI100", "Second"))
    assert bst.search("CSCI100").title == "First"
    assert len(list(bst)) == 1


def test_bst_search_missing():
    bst = BinarySearchTree()
    assert bst.search("CSCI100") is None
    bst.insert(Course("CSCI200", "Data"))
    assert bst.search("CSCI100") is None


def test_print_all_courses(capsys):
    bst = BinarySearchTree()
    bst.insert(Course("B1", "Beta"))
    bst.insert(Course("A1", "Alpha"))
    bst.print_all_courses()
    assert capsys.readouterr().out == (
        "Here is a sample schedule:\n\nA1, Alpha\nB1, Beta\n\n"
    )


def test_format_course():
    assert format_course(Course("C1", "Intro")) == "C1, Intro"
    assert format_course(Course("C2", "Next", ["C1", "M1"])) == (
        "C2, Next\nPrerequisites: C1, M1"
    )
    assert format_course(None) == "Course not found."


def test_load_courses(tmp_path, capsys):
    path = tmp_path / "courses.csv"
    path.write_text(
        "CSCI200,Data Structures,CSCI101\n\nBADLINE\nCSCI101,Intro\n",
        encoding="utf-8",
    )
    bst = BinarySearchTree()
    assert load_courses(str(path), bst) == 2
    assert bst.search("CSCI200").prerequisites == ["CSCI101"]
    assert bst.search("CSCI101").prerequisites == []
    out = capsys.readouterr().out
    assert "Warning: Invalid line format - BADLINE" in out
    assert "Data loaded successfully." in out


def test_load_courses_missing_file(tmp_path, capsys):
    missing = tmp_path / "none.csv"
    bst = BinarySearchTree()
    assert load_courses(str(missing), bst) == 0
    assert list(bst) == []
    assert f"Error: Could not open file {missing}" in capsys.readouterr().out


def test_main_flow(tmp_path, monkeypatch, capsys):
    path = tmp_path / "courses.csv"
    path.write_text("CSCI100,Intro\nCSCI200,Data,CSCI100\n", encoding="utf-8")
    answers = iter(["1", str(path), "2", "3", "csci200", "7", "x", "9"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "CSCI100, Intro" in out
    assert "Prerequisites: CSCI100" in out
    assert "7 is not a valid option." in out
    assert "Invalid input. Please enter a number." in out
    assert "Thank you for using the course planner!" in out