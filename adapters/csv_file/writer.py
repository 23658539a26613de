"""
CSV 계좌 출력 어댑터

계좌 스냅샷을 CSV로 기록.

출력 형식:
    client,available,held,total,locked
    1,1.5000,0.0000,1.5000,false
"""

import logging
from pathlib import Path
from typing import Iterable, TextIO

import pandas as pd

from core.constants import CsvColumns
from core.ledger.models import Account
from core.types import ClientId

from adapters.models import OutputRow

logger = logging.getLogger(__name__)


class CsvAccountWriter:
    """CSV 계좌 스냅샷 기록기

    IAccountSink 구현. 행 순서는 계약상 보장하지 않지만 client 오름차순으로 기록.

    Args:
        target: 출력 파일 경로 또는 텍스트 스트림 (예: sys.stdout)
    """

    def __init__(self, target: Path | str | TextIO):
        self.target = Path(target) if isinstance(target, str) else target

    def write(self, accounts: Iterable[tuple[ClientId, Account]]) -> int:
        """계좌 목록 기록

        Args:
            accounts: (client, Account) 스냅샷

        Returns:
            기록한 행 수

        Raises:
            OSError: 파일 쓰기 실패
        """
        rows = sorted(
            (OutputRow.from_account(client, account) for client, account in accounts),
            key=lambda row: row.client,
        )

        frame = pd.DataFrame(
            [row.to_dict() for row in rows],
            columns=list(CsvColumns.OUTPUT),
        )
        frame.to_csv(self.target, index=False, lineterminator="\n")

        logger.debug(f"Accounts written: {len(rows)} rows")
        return len(rows)
