"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
입력(Command 공급)과 출력(계좌 스냅샷 기록) 경계를 분리.
"""

from typing import Iterable, Iterator, Protocol, runtime_checkable

from core.domain.commands import TxCommand
from core.ledger.models import Account
from core.types import ClientId


@runtime_checkable
class ICommandSource(Protocol):
    """Command 공급자 인터페이스

    입력 순서대로 Command를 하나씩 반환.
    잘못된 행은 공급자가 로그를 남기고 건너뛰며 skipped_count에 집계.
    """

    @property
    def skipped_count(self) -> int:
        """건너뛴 행 수"""
        ...

    def __iter__(self) -> Iterator[TxCommand]:
        ...


@runtime_checkable
class IAccountSink(Protocol):
    """계좌 스냅샷 기록 인터페이스"""

    def write(self, accounts: Iterable[tuple[ClientId, Account]]) -> int:
        """계좌 목록 기록

        Args:
            accounts: (client, Account) 스냅샷

        Returns:
            기록한 행 수
        """
        ...
