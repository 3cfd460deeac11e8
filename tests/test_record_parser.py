from utils.record_parser import ParsedLines, parse_course_line


# ============================================================================
# parse_course_line
# ============================================================================

def test_number_and_title_only():
    course = parse_course_line("CSCI100,Introduction to Computer Science")
    assert course.course_number == "CSCI100"
    assert course.title == "Introduction to Computer Science"
    assert course.prerequisites == ()


def test_prerequisites_in_order():
    course = parse_course_line("CSCI300,Algorithms,CSCI200,MATH201")
    assert course.prerequisites == ("CSCI200", "MATH201")


def test_single_field_is_skipped():
    assert parse_course_line("X1") is None


def test_empty_line_is_skipped():
    assert parse_course_line("") is None
    assert parse_course_line("\n") is None


def test_only_one_leading_space_is_stripped():
    course = parse_course_line("X1,Title,  Pre1, Pre2")
    # "  Pre1" loses one space only
    assert course.prerequisites == (" Pre1", "Pre2")


def test_single_leading_space_stripped():
    course = parse_course_line("X1,Title, Pre1, Pre2")
    assert course.prerequisites == ("Pre1", "Pre2")


def test_trailing_whitespace_is_kept():
    course = parse_course_line("X1,Title,Pre1 ")
    assert course.prerequisites == ("Pre1 ",)


def test_empty_prerequisite_fields_dropped():
    course = parse_course_line("X1,Title,,Pre1, ,")
    assert course.prerequisites == ("Pre1",)


def test_title_may_be_empty():
    course = parse_course_line("X1,,Pre1")
    assert course.title == ""
    assert course.prerequisites == ("Pre1",)


def test_line_terminators_removed():
    course = parse_course_line("X1,Title,Pre1\r\n")
    assert course.prerequisites == ("Pre1",)


def test_title_keeps_leading_space():
    # only prerequisite fields are trimmed
    course = parse_course_line("X1, Title")
    assert course.title == " Title"


def test_custom_delimiter():
    course = parse_course_line("X1|Title|Pre1", delimiter="|")
    assert course.course_number == "X1"
    assert course.prerequisites == ("Pre1",)


def test_duplicate_prerequisites_preserved():
    course = parse_course_line("X1,Title,A,A")
    assert course.prerequisites == ("A", "A")


# ============================================================================
# ParsedLines
# ============================================================================

def test_parsed_lines_counts_skips():
    parsed = ParsedLines(["A1,First\n", "bad\n", "\n", "B2,Second\n"])
    numbers = [c.course_number for c in parsed]
    assert numbers == ["A1", "B2"]
    assert parsed.skipped == [2, 3]


def test_trailing_delimiter_without_title_is_skipped():
    assert parse_course_line("X1,") is None
    assert parse_course_line("X1,\r\n") is None


def test_empty_title_followed_by_delimiter_kept():
    course = parse_course_line("X1,,")
    assert course.title == ""
    assert course.prerequisites == ()


def test_empty_course_number_is_accepted():
    # no non-empty check on the key; the course is stored under ""
    course = parse_course_line(",Title")
    assert course.course_number == ""
    assert course.title == "Title"


def test_parsed_lines_skips_trailing_delimiter():
    parsed = ParsedLines(["X1,\n", "X2,,Pre1\n"])
    courses = list(parsed)
    assert [c.course_number for c in courses] == ["X2"]
    assert courses[0].title == ""
    assert parsed.skipped == [1]
