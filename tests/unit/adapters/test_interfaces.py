"""
adapters/interfaces.py 테스트

Protocol 구조적 타이핑 확인 (Mock 구현 교체 가능 여부)
"""

from typing import Iterable, Iterator

from adapters.interfaces import IAccountSink, ICommandSource
from core.domain.amount import Amount
from core.domain.commands import DepositCommand, TxCommand
from core.ledger import Account
from core.types import ClientId


class ListCommandSource:
    """메모리 Command 공급자"""

    def __init__(self, commands: list[TxCommand], skipped: int = 0):
        self._commands = commands
        self._skipped = skipped

    @property
    def skipped_count(self) -> int:
        return self._skipped

    def __iter__(self) -> Iterator[TxCommand]:
        return iter(self._commands)


class ListAccountSink:
    """메모리 계좌 기록기"""

    def __init__(self) -> None:
        self.rows: list[tuple[ClientId, Account]] = []

    def write(self, accounts: Iterable[tuple[ClientId, Account]]) -> int:
        self.rows = list(accounts)
        return len(self.rows)


class TestICommandSource:
    """ICommandSource 테스트"""

    def test_structural_match(self) -> None:
        """구현 클래스가 Protocol 만족"""
        source = ListCommandSource([DepositCommand(client=1, tx=1, amount=Amount(1))])

        assert isinstance(source, ICommandSource)
        assert len(list(source)) == 1

    def test_non_matching(self) -> None:
        """skipped_count 없으면 불일치"""
        assert not isinstance([1, 2, 3], ICommandSource)


class TestIAccountSink:
    """IAccountSink 테스트"""

    def test_structural_match(self) -> None:
        """구현 클래스가 Protocol 만족"""
        sink = ListAccountSink()

        assert isinstance(sink, IAccountSink)
        assert sink.write([(1, Account())]) == 1

    def test_non_matching(self) -> None:
        """write 없으면 불일치"""
        assert not isinstance(object(), IAccountSink)
