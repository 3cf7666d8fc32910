from src.crew_tool.services.csv_parser import normalize_header, parse_csv, split_line


def test_parse_rows_in_order_with_normalized_headers():
    content = (
        "First Name,Last Name,EMAIL,Vessel Assignment\n"
        "John,Smith,john@example.com,MV Test\n"
        "Jane,Doe,jane@example.com,MV Other\n"
        "Ali,Khan,ali@example.com,MV Test\n"
    )

    rows = parse_csv(content)

    assert len(rows) == 3
    assert list(rows[0].keys()) == ["first_name", "last_name", "email", "vessel_assignment"]
    assert [r["first_name"] for r in rows] == ["John", "Jane", "Ali"]


def test_quoted_field_keeps_embedded_comma():
    rows = parse_csv('full_name,email\n"Smith, John",john@example.com\n')

    assert rows == [{"full_name": "Smith, John", "email": "john@example.com"}]


def test_header_only_yields_no_rows():
    assert parse_csv("first_name,last_name,email\n") == []
    assert parse_csv("") == []


def test_blank_lines_are_skipped():
    content = "first_name,email\n\nJohn,john@example.com\n   \nJane,jane@example.com\n"

    rows = parse_csv(content)

    assert [r["first_name"] for r in rows] == ["John", "Jane"]


def test_crlf_line_endings():
    rows = parse_csv("first_name,email\r\nJohn,john@example.com\r\n")

    assert rows == [{"first_name": "John", "email": "john@example.com"}]


def test_missing_trailing_values_become_empty_strings():
    rows = parse_csv("first_name,last_name,email\nJohn\n")

    assert rows == [{"first_name": "John", "last_name": "", "email": ""}]


def test_fields_are_trimmed_and_single_quotes_stripped():
    assert split_line("  John , 'Smith' ,x") == ["John", "Smith", "x"]


def test_normalize_header():
    assert normalize_header('  "Vessel   Name" ') == "vessel_name"
    assert normalize_header("Join Date") == "join_date"


def test_escaped_quotes_are_not_unescaped():
    # "" toggles quote state twice and contributes nothing
    assert split_line('"say ""hi""",x') == ["say hi", "x"]


def test_byte_order_mark_is_dropped_from_first_header():
    rows = parse_csv("\ufefffirst_name,last_name,email\nJohn,Smith,john@example.com\n")

    assert list(rows[0].keys()) == ["first_name", "last_name", "email"]
    assert rows[0]["first_name"] == "John"


def test_only_newlines_separate_rows():
    content = (
        "first_name,last_name,email\n"
        '"Jo\u2028hn",Smith,john@example.com\n'
        "Jane\x0cDoe,Doe,jane@example.com\n"
    )

    rows = parse_csv(content)

    assert len(rows) == 2
    assert rows[0]["first_name"] == "Jo\u2028hn"
    assert rows[1]["email"] == "jane@example.com"
