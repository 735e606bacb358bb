import pytest

from sheetdash.data.parser import coerce_text, parse
from sheetdash.data.schemas import FileKind, classify_filename
from sheetdash.errors import ParseFailure, UnsupportedFormat


def test_csv_cells_are_coerced_individually():
    table = parse(b"Name,Amount,Active,Note\nA,10,true,\nB,2.5,FALSE,x\n", FileKind.DELIMITED)
    assert table.columns == ["Name", "Amount", "Active", "Note"]
    assert table.rows == [
        {"Name": "A", "Amount": 10, "Active": True, "Note": None},
        {"Name": "B", "Amount": 2.5, "Active": False, "Note": "x"},
    ]


def test_csv_columns_match_first_row(sales_csv):
    table = parse(sales_csv, FileKind.DELIMITED)
    assert len(table.rows) == 3
    assert table.columns == list(table.rows[0].keys())


def test_csv_mixed_column_keeps_text():
    table = parse(b"Code\n10\nA7\n", FileKind.DELIMITED)
    assert [r["Code"] for r in table.rows] == [10, "A7"]


def test_csv_blank_rows_are_dropped():
    table = parse(b"A,B\n1,2\n,\n\n3,4\n", FileKind.DELIMITED)
    assert table.rows == [{"A": 1, "B": 2}, {"A": 3, "B": 4}]


def test_header_only_csv_is_empty():
    table = parse(b"A,B,C\n", FileKind.DELIMITED)
    assert table.is_empty
    assert table.columns == []
    assert table.rows == []


def test_empty_buffer_is_empty():
    assert parse(b"", FileKind.DELIMITED).is_empty


def test_csv_falls_back_to_windows_1252():
    table = parse("Name,Amount\nCaf\u00e9,3\n".encode("cp1252"), FileKind.DELIMITED)
    assert table.rows == [{"Name": "Caf\u00e9", "Amount": 3}]


def test_xlsx_reads_first_sheet(sales_xlsx):
    table = parse(sales_xlsx, FileKind.SPREADSHEET)
    assert table.columns == ["OrderDate", "TotalDue", "Territory", "Rush"]
    assert table.rows == [
        {"OrderDate": "2024-01-01", "TotalDue": 10, "Territory": "North", "Rush": True},
        {"OrderDate": "2024-01-02T13:30:00", "TotalDue": 5.5, "Territory": None, "Rush": False},
    ]


def test_corrupt_spreadsheet_raises_parse_failure():
    with pytest.raises(ParseFailure) as excinfo:
        parse(b"definitely not a workbook", FileKind.SPREADSHEET)
    assert excinfo.value.details


def test_unknown_kind_is_unsupported():
    with pytest.raises(UnsupportedFormat):
        parse(b"a,b\n1,2\n", "pdf")


@pytest.mark.parametrize("text,expected", [
    ("  ", None),
    ("-3", -3),
    ("1e3", 1000.0),
    ("True", True),
    ("nan", "nan"),
    ("1,234", "1,234"),
    ("1_000", "1_000"),
    ("0x10", "0x10"),
    ("inf", "inf"),
    (".5", 0.5),
])
def test_coerce_text(text, expected):
    assert coerce_text(text) == expected


@pytest.mark.parametrize("name,kind", [
    ("report.xlsx", FileKind.SPREADSHEET),
    ("legacy.xls", FileKind.SPREADSHEET),
    ("orders.csv", FileKind.DELIMITED),
    ("data.txt", None),
    ("ORDERS.CSV", None),
    ("archive.csv.gz", None),
])
def test_classify_filename(name, kind):
    assert classify_filename(name) == kind
