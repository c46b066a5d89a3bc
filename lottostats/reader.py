"""
Result-file readers.

Turns the raw bytes of a spreadsheet or delimited-text export into a list of
rows, each a list of cells (str, int, float, datetime or None).  No column
meaning is assumed here; that is the header locator's job.
"""
import csv
import io
import os

import numpy as np
import pandas as pd

from lottostats.errors import MalformedFileError

SPREADSHEET = "spreadsheet"
DELIMITED = "csv"

SPREADSHEET_SUFFIXES = (".xlsx", ".xlsm")
DATE_SEPARATORS = ("/", "-", ".")


def infer_kind(file_name: str) -> str:
    """Guess the container kind from the file name."""
    if file_name.lower().endswith(SPREADSHEET_SUFFIXES):
        return SPREADSHEET
    return DELIMITED


def _clean_spreadsheet_cell(value):
    """Map pandas/numpy cell values onto plain Python values."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    if value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def read_spreadsheet(data: bytes, file_name: str) -> list:
    """Decode the first sheet of a workbook, keeping native cell types."""
    try:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, header=None)
    except Exception as e:
        raise MalformedFileError(file_name, str(e)) from e

    df = df.astype(object)
    return [[_clean_spreadsheet_cell(v) for v in row] for row in df.itertuples(index=False)]


def _coerce_text_cell(text: str):
    """
    Convert a text cell to a number when that is safe.

    Anything containing a date separator stays text, otherwise
    "01/02/2024" or "2024-02-01" would be mangled.
    """
    if text == "":
        return None
    if any(sep in text for sep in DATE_SEPARATORS):
        return text
    try:
        num = float(text)
    except ValueError:
        return text
    if np.isnan(num) or np.isinf(num):
        return text
    return int(num) if num.is_integer() else num


def _sniff_delimiter(lines: list) -> str:
    sample = "\n".join(lines[:10])
    return ";" if sample.count(";") > sample.count(",") else ","


def read_delimited(data: bytes, file_name: str) -> list:
    """Split a comma/semicolon separated export into coerced cells."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = data.decode("latin-1")

    if "\x00" in text:
        raise MalformedFileError(file_name, "binary content in a text file")

    lines = text.replace("\r", "").strip().split("\n")
    if lines == [""]:
        return []

    delimiter = _sniff_delimiter(lines)
    grid = []
    try:
        for row in csv.reader(lines, delimiter=delimiter):
            grid.append([_coerce_text_cell(cell.strip().strip('"').strip()) for cell in row])
    except csv.Error as e:
        raise MalformedFileError(file_name, str(e)) from e
    return grid


def read_grid(data: bytes, file_name: str, kind=None) -> list:
    """Read *data* as a grid, dispatching on *kind* or the file name."""
    kind = kind or infer_kind(file_name)
    if kind == SPREADSHEET:
        return read_spreadsheet(data, file_name)
    if kind == DELIMITED:
        return read_delimited(data, file_name)
    raise ValueError(f"Unknown file kind '{kind}'")


def read_file(path: str, kind=None) -> list:
    """Read a result file from disk."""
    with open(path, "rb") as fh:
        data = fh.read()
    return read_grid(data, os.path.basename(path), kind)
