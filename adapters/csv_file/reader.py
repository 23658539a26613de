"""
CSV 거래 입력 어댑터

거래 CSV 파일을 청크 단위로 읽어 Command로 변환.

입력 형식 (헤더 필수, 컬럼 순서 무관):
    type,client,tx,amount
    deposit,1,1,1.0
    dispute,1,1,

- 필드/헤더 앞뒤 공백 제거, type은 대소문자 무시
- 필드가 모자란 행은 허용 (amount 생략), 필드가 넘치는 행은 건너뜀
- 잘못된 행은 WARNING 로그 후 건너뛰고 나머지 계속 처리
- 헤더에 필수 컬럼이 없으면 CsvFormatError (실행 중단)
"""

import logging
from pathlib import Path
from typing import Any, Iterator

import pandas as pd
from pandas.errors import EmptyDataError

from core.constants import CsvColumns, Defaults, IdLimits
from core.domain.amount import Amount, AmountParseError
from core.domain.commands import InvalidCommandError, TxCommand, create_command
from core.types import CommandType

from adapters.models import InputRow

logger = logging.getLogger(__name__)


class CsvFormatError(Exception):
    """CSV 헤더 형식 오류 (필수 컬럼 누락)"""
    pass


class InvalidRowError(ValueError):
    """변환할 수 없는 입력 행"""
    pass


def _cell(value: Any) -> str | None:
    """pandas 셀 값 → 공백 제거 문자열 (누락이면 None)"""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value).strip()


def _parse_id(raw: str, max_value: int, name: str) -> int:
    text = raw.strip()
    if not text.isascii() or not text.isdigit():
        raise InvalidRowError(f"{name} 값이 부호 없는 정수가 아닙니다: {raw!r}")
    value = int(text)
    if value > max_value:
        raise InvalidRowError(f"{name} 값이 범위를 벗어났습니다 (최대 {max_value}): {value}")
    return value


def _parse_type(raw: str) -> CommandType:
    try:
        return CommandType(raw.strip().lower())
    except ValueError as e:
        valid = [t.value for t in CommandType]
        raise InvalidRowError(f"알 수 없는 type: {raw!r}. 유효한 값: {valid}") from e


def row_to_command(row: InputRow) -> TxCommand:
    """입력 행 → Command 변환

    Args:
        row: 입력 행

    Returns:
        TxCommand

    Raises:
        InvalidRowError: type/client/tx 오류 또는 필수 amount 누락
        AmountParseError: amount 파싱 실패
        InvalidCommandError: 음수 금액
    """
    command_type = _parse_type(row.type)
    client = _parse_id(row.client, IdLimits.CLIENT_ID_MAX, CsvColumns.CLIENT)
    tx = _parse_id(row.tx, IdLimits.TX_ID_MAX, CsvColumns.TX)

    amount: Amount | None = None
    if command_type.requires_amount:
        if row.amount is None:
            raise InvalidRowError(f"{command_type.value} 행에 amount가 없습니다")
        amount = Amount.parse(row.amount)

    return create_command(command_type, client, tx, amount)


class CsvCommandReader:
    """CSV Command 공급자

    ICommandSource 구현. 파일을 chunk_size 행씩 스트리밍하여 Command 반환.

    Args:
        path: 입력 CSV 경로
        chunk_size: 한 번에 읽을 행 수

    사용 예시:
    ```python
    reader = CsvCommandReader(Path("transactions.csv"))
    for command in reader:
        engine.apply(command)
    print(reader.rows_read, reader.skipped_count)
    ```
    """

    def __init__(self, path: Path | str, chunk_size: int = Defaults.CSV_CHUNK_SIZE):
        self.path = Path(path)
        self.chunk_size = chunk_size

        # 통계
        self._rows_read = 0
        self._skipped_count = 0

    @property
    def rows_read(self) -> int:
        """읽은 데이터 행 수 (건너뛴 행 포함)"""
        return self._rows_read

    @property
    def skipped_count(self) -> int:
        """건너뛴 행 수"""
        return self._skipped_count

    def __iter__(self) -> Iterator[TxCommand]:
        for row in self.iter_rows():
            try:
                command = row_to_command(row)
            except (InvalidRowError, AmountParseError, InvalidCommandError) as e:
                self._skip(f"row {row.row_no}", e)
                continue
            yield command

    def iter_rows(self) -> Iterator[InputRow]:
        """원본 입력 행 순회

        Raises:
            CsvFormatError: 필수 컬럼 누락
            OSError: 파일 열기/읽기 실패
        """
        columns = self._read_header()
        if columns is None:
            return

        # header=None: 헤더 줄도 데이터로 읽어 필드 수 기준을 헤더로 고정 (index 0 = 헤더)
        reader = pd.read_csv(
            self.path,
            header=None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            chunksize=self.chunk_size,
            engine="python",
            on_bad_lines=self._on_bad_line,
        )

        has_amount = CsvColumns.AMOUNT in columns
        with reader:
            for chunk in reader:
                chunk.columns = columns
                for index, record in zip(chunk.index, chunk.to_dict(orient="records")):
                    if index == 0:
                        continue
                    self._rows_read += 1
                    yield InputRow(
                        row_no=int(index),
                        type=_cell(record[CsvColumns.TYPE]) or "",
                        client=_cell(record[CsvColumns.CLIENT]) or "",
                        tx=_cell(record[CsvColumns.TX]) or "",
                        amount=_cell(record[CsvColumns.AMOUNT]) if has_amount else None,
                    )

    def _read_header(self) -> list[str] | None:
        """헤더 검증

        Returns:
            정규화된 컬럼명 목록 (빈 파일이면 None)
        """
        try:
            header = pd.read_csv(self.path, dtype=str, nrows=0, skipinitialspace=True)
        except EmptyDataError:
            logger.warning(f"입력 파일이 비어 있습니다: {self.path}")
            return None

        columns = [str(c).strip().lower() for c in header.columns]
        missing = [c for c in CsvColumns.REQUIRED_INPUT if c not in columns]
        if missing:
            raise CsvFormatError(
                f"CSV 헤더에 필수 컬럼이 없습니다: {missing} (헤더: {columns})"
            )
        return columns

    def _on_bad_line(self, bad_line: list[str]) -> None:
        """필드 수가 헤더보다 많은 행 (pandas 콜백, None 반환 = 건너뜀)"""
        self._rows_read += 1
        self._skip("malformed row", InvalidRowError(f"필드 수 초과: {bad_line}"))
        return None

    def _skip(self, where: str, error: Exception) -> None:
        self._skipped_count += 1
        logger.warning(f"Skip {where}: {error}")
