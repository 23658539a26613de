"""
CSV 파일 어댑터

거래 CSV 입력(reader)과 계좌 CSV 출력(writer)
"""

from adapters.csv_file.reader import (
    CsvCommandReader,
    CsvFormatError,
    InvalidRowError,
    row_to_command,
)
from adapters.csv_file.writer import CsvAccountWriter

__all__ = [
    "CsvCommandReader",
    "CsvAccountWriter",
    "CsvFormatError",
    "InvalidRowError",
    "row_to_command",
]
