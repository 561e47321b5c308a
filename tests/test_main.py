"""Demonstration driver output"""
import io
from py_table2d.__main__ import main


EXPECTED_HEAD = (
    "Table 4x2\n"
    "  [1.000000, 2.000000]\n"
    "  [3.000000, 4.000000]\n"
    "  [5.000000, 6.000000]\n"
    "  [7.000000, 8.000000]\n"
    "---\n"
    "column[0] = {row[3]=7.000000, row[2]=5.000000, row[1]=3.000000, row[0]=1.000000}\n"
    "column[1] = {row[3]=8.000000, row[2]=6.000000, row[1]=4.000000, row[0]=2.000000}\n"
    "---\n"
    "Table 12x4\n"
    "  [1.000000, 2.000000, 0.330000, 0.330000]\n"
)


def test_default_run():
    out = io.StringIO()
    assert main([], out=out) == 0
    text = out.getvalue()
    assert text.startswith(EXPECTED_HEAD)
    lines = text.splitlines()
    assert len(lines) == 5 + 1 + 2 + 1 + 13
    assert lines[-1] == "  [0.330000, 0.330000, 0.330000, 0.330000]"


def test_custom_shape():
    out = io.StringIO()
    assert main(["--rows", "1", "--columns", "1", "--resize", "2", "1", "--fill", "5"], out=out) == 0
    assert out.getvalue() == (
        "Table 1x1\n"
        "  [1.000000]\n"
        "---\n"
        "column[0] = {row[0]=1.000000}\n"
        "---\n"
        "Table 2x1\n"
        "  [1.000000]\n"
        "  [5.000000]\n"
    )


def test_negative_shape_fails(capsys):
    assert main(["--rows", "-1"], out=io.StringIO()) == 1
    assert capsys.readouterr().err == "Invalid size\n"


def test_negative_resize_fails(capsys):
    out = io.StringIO()
    assert main(["--resize", "-1", "2"], out=out) == 1
    assert capsys.readouterr().err == "Invalid size\n"
