import pytest

from lottostats.errors import HeaderNotFoundError
from lottostats.header import (
    in_range_number,
    locate_header,
    loose_header,
    strict_header,
)

from conftest import STRICT_ROWS


def test_strict_header_after_title_rows(profile):
    grid = [["Resultados Quina"], [], *STRICT_ROWS]
    match = locate_header(grid, profile)
    assert match.header_row == 2
    assert match.contest_col == 0
    assert match.date_col == 1
    assert match.number_cols == (2, 3, 4, 5, 6)


def test_strict_takes_first_slot_columns_left_to_right(profile):
    header = ["Contest", "Draw Date", "Ball 1", "Ball 2", "Ball 3", "Ball 4", "Ball 5", "Ball 6"]
    match = strict_header([header], profile)
    assert match.number_cols == (2, 3, 4, 5, 6)


def test_english_and_portuguese_labels(profile):
    header = ["CONCURSO", "DATA", "Dezena 1", "dezena_2", "d3", "num4", "Number5"]
    assert strict_header([header], profile).number_cols == (2, 3, 4, 5, 6)


def test_loose_header_when_number_columns_unlabelled(profile):
    grid = [
        ["Concurso", "Data", "Resultado", "", "", "", ""],
        [101, "03/01/2024", 1, 2, 3, 4, 5],
    ]
    assert strict_header(grid, profile) is None
    match = locate_header(grid, profile)
    assert match.header_row == 0
    assert match.number_cols is None


def test_loose_header_needs_a_draw_like_next_row(profile):
    grid = [
        ["Concurso", "Data", "Resultado"],
        [101, "03/01/2024", "1 2 3 4 5"],
    ]
    assert loose_header(grid, profile) is None
    with pytest.raises(HeaderNotFoundError) as exc:
        locate_header(grid, profile)
    assert "5 number columns" in str(exc.value)


def test_header_beyond_scan_window_is_not_found(profile):
    grid = [["filler"]] * 10 + STRICT_ROWS
    with pytest.raises(HeaderNotFoundError) as exc:
        locate_header(grid, profile)
    assert exc.value.missing == ["contest", "date", "5 number columns"]


def test_missing_date_column_is_named(profile):
    grid = [["Concurso", "Bola1", "Bola2", "Bola3", "Bola4", "Bola5"]]
    with pytest.raises(HeaderNotFoundError) as exc:
        locate_header(grid, profile)
    assert exc.value.missing == ["date"]


@pytest.mark.parametrize("cell,expected", [
    (7, 7), (7.0, 7), ("07", 7), (" 25 ", 25),
    (0, None), (26, None), (7.5, None), ("7a", None), (True, None), (None, None),
    (float("nan"), None),
])
def test_in_range_number(cell, expected):
    assert in_range_number(cell, 25) == expected


def test_accented_portuguese_labels(profile):
    header = ["Concurso", "Data", "Número 1", "Número 2", "número3", "Núm 4", "Numero 5"]
    assert strict_header([header], profile).number_cols == (2, 3, 4, 5, 6)
