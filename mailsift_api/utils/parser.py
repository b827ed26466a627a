# mailsift_api/utils/parser.py
import csv
import io
import zipfile
from typing import Iterable, List

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError

SUPPORTED_EXTENSIONS = (".csv", ".txt", ".xlsx", ".xls")


class UploadParseError(ValueError):
    """The uploaded file could not be read as the format its extension claims."""


def first_cells(rows: Iterable[Iterable]) -> List[str]:
    """First non-blank cell of each row, stripped. Blank rows are skipped."""
    out = []
    for row in rows:
        for cell in row or ():
            if cell is None:
                continue
            text = str(cell).strip()
            if text:
                out.append(text)
                break
    return out


def csv_rows(content: bytes):
    # Undecodable bytes become U+FFFD so the address is rejected rather than
    # silently shortened.
    text = content.decode("utf-8-sig", errors="replace")
    return csv.reader(io.StringIO(text))


def xlsx_rows(content: bytes):
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(content), read_only=True)
    except (zipfile.BadZipFile, InvalidFileException, KeyError, OSError) as e:
        raise UploadParseError(f"Not a readable XLSX workbook: {e}") from e
    try:
        return list(workbook.active.iter_rows(values_only=True))
    finally:
        workbook.close()


def xls_rows(content: bytes):
    try:
        workbook = xlrd.open_workbook(file_contents=content)
    except (xlrd.XLRDError, CompDocError) as e:
        raise UploadParseError(f"Not a readable XLS workbook: {e}") from e
    sheet = workbook.sheet_by_index(0)
    return [[cell.value for cell in sheet.row(i)] for i in range(sheet.nrows)]


def parse_upload(filename: str, content: bytes) -> List[str]:
    """
    Pick a reader by extension and return one address per row, duplicates
    dropped (first occurrence wins). Addresses are stripped but not lowercased:
    domain scoring is case-sensitive.

    Raises UploadParseError for workbooks that cannot be opened.
    """
    fname = filename.lower()
    if fname.endswith(".xlsx"):
        rows = xlsx_rows(content)
    elif fname.endswith(".xls"):
        rows = xls_rows(content)
    else:
        rows = csv_rows(content)
    return list(dict.fromkeys(first_cells(rows)))
