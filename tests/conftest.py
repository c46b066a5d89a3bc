import io
from datetime import date

import pandas as pd
import pytest

from lottostats.extractor import Draw
from lottostats.profiles import LotteryProfile


@pytest.fixture
def profile():
    return LotteryProfile(
        key="test", name="Test", total_numbers=25, draw_size=5,
        bet_size=5, hot_count=5, cold_count=5,
    )


@pytest.fixture
def scenario_history():
    """Three draws, the newest repeating the oldest combination."""
    return (
        Draw(103, (1, 2, 3, 4, 5), date(2024, 1, 17)),
        Draw(102, (1, 2, 3, 4, 6), date(2024, 1, 10)),
        Draw(101, (1, 2, 3, 4, 5), date(2024, 1, 3)),
    )


def make_csv(rows, delimiter=","):
    return "\n".join(delimiter.join(str(c) for c in row) for row in rows).encode("utf-8")


def make_xlsx(rows):
    buf = io.BytesIO()
    pd.DataFrame(rows).to_excel(buf, header=False, index=False)
    return buf.getvalue()


STRICT_ROWS = [
    ["Concurso", "Data Sorteio", "Bola1", "Bola2", "Bola3", "Bola4", "Bola5"],
    [101, "03/01/2024", 1, 2, 3, 4, 5],
    [102, "10/01/2024", 6, 2, 3, 4, 1],
    [103, "17/01/2024", 1, 2, 3, 4, 5],
]
