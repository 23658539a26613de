"""
Transaction Engine

Command를 하나씩 받아 LedgerStore를 변경하는 상태 머신.

처리 원칙:
- 적용 조건을 만족하지 않으면 아무것도 바꾸지 않고 IGNORED 반환 (에러 아님)
- 금액 연산 overflow는 AmountOverflowError로 전파 (해당 명령만 실패)
- 새 금액을 모두 계산한 뒤에 한꺼번에 반영하고, 거래 상태는 마지막에 변경
  → 실패한 명령은 부분 변경을 남기지 않음
- 계좌 잠금(locked)은 입금/출금만 막음. 분쟁/해소/차지백은 잠긴 계좌에서도 처리
"""

import logging
from typing import Callable

from core.domain.commands import (
    ChargebackCommand,
    DepositCommand,
    DisputeCommand,
    ResolveCommand,
    TxCommand,
    WithdrawalCommand,
)
from core.domain.state_machines import DisputeStateMachine
from core.ledger.models import TxRecord
from core.ledger.store import LedgerStore
from core.types import CommandOutcome, DisputeState, TxKind

logger = logging.getLogger(__name__)


class TransactionEngine:
    """거래 처리 엔진

    Command 타입별 핸들러 테이블로 디스패치.
    입력 순서대로 한 번에 하나씩, 동기적으로 적용.

    Args:
        store: Ledger 저장소 (None이면 새로 생성)

    사용 예시:
    ```python
    engine = TransactionEngine()
    engine.apply(DepositCommand(client=1, tx=1, amount=Amount.parse("1.0")))
    engine.apply(WithdrawalCommand(client=1, tx=2, amount=Amount.parse("0.5")))

    account = engine.store.account_if_exists(1)
    print(account.available)  # 0.5000
    ```
    """

    def __init__(self, store: LedgerStore | None = None):
        self.store = store if store is not None else LedgerStore()

        # 핸들러 레지스트리 (닫힌 집합)
        self._handlers: dict[type, Callable[..., CommandOutcome]] = {
            DepositCommand: self._apply_deposit,
            WithdrawalCommand: self._apply_withdrawal,
            DisputeCommand: self._apply_dispute,
            ResolveCommand: self._apply_resolve,
            ChargebackCommand: self._apply_chargeback,
        }

    def apply(self, command: TxCommand) -> CommandOutcome:
        """Command 적용

        Args:
            command: 적용할 Command

        Returns:
            APPLIED: 상태 변경됨
            IGNORED: 적용 조건 불충족 (상태 변경 없음)

        Raises:
            AmountOverflowError: 금액 연산 overflow
            TypeError: 알 수 없는 Command 타입
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command type: {type(command).__name__}")
        return handler(command)

    def _ignore(self, command: TxCommand, reason: str) -> CommandOutcome:
        logger.debug(
            f"Command ignored: {command.command_type.value} "
            f"client={command.client} tx={command.tx} ({reason})"
        )
        return CommandOutcome.IGNORED

    # -------------------------------------------------------------------------
    # 입금 / 출금
    # -------------------------------------------------------------------------

    def _apply_deposit(self, cmd: DepositCommand) -> CommandOutcome:
        """입금: available 증가 + 거래 기록"""
        if self.store.has_transaction(cmd.tx):
            return self._ignore(cmd, "duplicate tx")

        account = self.store.account_or_create(cmd.client)
        if account.locked:
            return self._ignore(cmd, "account locked")

        available = account.available.checked_add(cmd.amount)
        # total(available + held)도 i64 범위 안이어야 리포트 가능
        account.held.checked_add(available)

        account.available = available
        self.store.insert_transaction(
            cmd.tx,
            TxRecord(client=cmd.client, kind=TxKind.DEPOSIT, amount=cmd.amount),
        )
        return CommandOutcome.APPLIED

    def _apply_withdrawal(self, cmd: WithdrawalCommand) -> CommandOutcome:
        """출금: 잔고 충분하면 available 감소 + 거래 기록"""
        if self.store.has_transaction(cmd.tx):
            return self._ignore(cmd, "duplicate tx")

        account = self.store.account_or_create(cmd.client)
        if account.locked:
            return self._ignore(cmd, "account locked")

        if account.available < cmd.amount:
            return self._ignore(cmd, "insufficient funds")

        account.available = account.available.checked_sub(cmd.amount)
        self.store.insert_transaction(
            cmd.tx,
            TxRecord(client=cmd.client, kind=TxKind.WITHDRAWAL, amount=cmd.amount),
        )
        return CommandOutcome.APPLIED

    # -------------------------------------------------------------------------
    # 분쟁 생명주기
    # -------------------------------------------------------------------------

    def _find_record(
        self,
        cmd: DisputeCommand | ResolveCommand | ChargebackCommand,
        target: DisputeState,
    ) -> tuple[TxRecord | None, str]:
        """분쟁 관련 명령의 대상 거래 조회 (공통 적격성 검사)

        Returns:
            (TxRecord, "") 또는 (None, 무시 사유)
        """
        record = self.store.transaction(cmd.tx)
        if record is None:
            return None, "unknown tx"
        if record.client != cmd.client:
            return None, "client mismatch"
        if not DisputeStateMachine.can_transition(record.state, target):
            return None, f"state {record.state.value} cannot become {target.value}"
        return record, ""

    def _apply_dispute(self, cmd: DisputeCommand) -> CommandOutcome:
        """분쟁: 입금액을 available → held 로 이동"""
        record, reason = self._find_record(cmd, DisputeState.DISPUTED)
        if record is None:
            return self._ignore(cmd, reason)
        if record.kind != TxKind.DEPOSIT:
            return self._ignore(cmd, "not a deposit")

        account = self.store.account_or_create(cmd.client)
        if account.available < record.amount:
            return self._ignore(cmd, "insufficient available funds")

        available = account.available.checked_sub(record.amount)
        held = account.held.checked_add(record.amount)

        account.available = available
        account.held = held
        record.state = DisputeStateMachine.transition(record.state, DisputeState.DISPUTED)
        return CommandOutcome.APPLIED

    def _apply_resolve(self, cmd: ResolveCommand) -> CommandOutcome:
        """분쟁 해소: held → available 로 복귀"""
        record, reason = self._find_record(cmd, DisputeState.NORMAL)
        if record is None:
            return self._ignore(cmd, reason)

        account = self.store.account_or_create(cmd.client)
        held = account.held.checked_sub(record.amount)
        available = account.available.checked_add(record.amount)

        account.held = held
        account.available = available
        record.state = DisputeStateMachine.transition(record.state, DisputeState.NORMAL)
        return CommandOutcome.APPLIED

    def _apply_chargeback(self, cmd: ChargebackCommand) -> CommandOutcome:
        """차지백: held에서 금액 제거 + 계좌 잠금"""
        record, reason = self._find_record(cmd, DisputeState.CHARGED_BACK)
        if record is None:
            return self._ignore(cmd, reason)

        account = self.store.account_or_create(cmd.client)
        account.held = account.held.checked_sub(record.amount)
        account.locked = True
        record.state = DisputeStateMachine.transition(record.state, DisputeState.CHARGED_BACK)
        return CommandOutcome.APPLIED
