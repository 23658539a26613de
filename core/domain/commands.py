"""
Command 도메인 모델

입력 한 줄 = Command 하나. CSV 형식과 분리된 타입 표현.
Command는 불변이며, 적용 결과는 LedgerStore 변경으로만 나타남.
"""

from dataclasses import dataclass
from typing import Any, Union

from core.domain.amount import Amount
from core.types import ClientId, CommandType, TxId


class InvalidCommandError(ValueError):
    """Command 생성 값 오류 (예: 음수 금액)"""
    pass


def _require_non_negative(command_type: CommandType, amount: Amount) -> None:
    if amount.is_negative():
        raise InvalidCommandError(
            f"{command_type.value} 금액은 음수일 수 없습니다: {amount}"
        )


@dataclass(frozen=True)
class DepositCommand:
    """입금

    Attributes:
        client: 고객 ID
        tx: 거래 ID (전역 유일)
        amount: 입금액 (0 이상)
    """

    client: ClientId
    tx: TxId
    amount: Amount

    def __post_init__(self) -> None:
        _require_non_negative(self.command_type, self.amount)

    @property
    def command_type(self) -> CommandType:
        return CommandType.DEPOSIT


@dataclass(frozen=True)
class WithdrawalCommand:
    """출금

    Attributes:
        client: 고객 ID
        tx: 거래 ID (전역 유일)
        amount: 출금액 (0 이상)
    """

    client: ClientId
    tx: TxId
    amount: Amount

    def __post_init__(self) -> None:
        _require_non_negative(self.command_type, self.amount)

    @property
    def command_type(self) -> CommandType:
        return CommandType.WITHDRAWAL


@dataclass(frozen=True)
class DisputeCommand:
    """분쟁 제기 (기존 입금 tx 참조)"""

    client: ClientId
    tx: TxId

    @property
    def command_type(self) -> CommandType:
        return CommandType.DISPUTE


@dataclass(frozen=True)
class ResolveCommand:
    """분쟁 해소 (분쟁 중인 tx 참조)"""

    client: ClientId
    tx: TxId

    @property
    def command_type(self) -> CommandType:
        return CommandType.RESOLVE


@dataclass(frozen=True)
class ChargebackCommand:
    """차지백 (분쟁 중인 tx 참조, 계좌 잠금)"""

    client: ClientId
    tx: TxId

    @property
    def command_type(self) -> CommandType:
        return CommandType.CHARGEBACK


# 닫힌 합 타입: 처리 핸들러는 이 다섯 가지만 존재
TxCommand = Union[
    DepositCommand,
    WithdrawalCommand,
    DisputeCommand,
    ResolveCommand,
    ChargebackCommand,
]

COMMAND_CLASSES: dict[CommandType, type] = {
    CommandType.DEPOSIT: DepositCommand,
    CommandType.WITHDRAWAL: WithdrawalCommand,
    CommandType.DISPUTE: DisputeCommand,
    CommandType.RESOLVE: ResolveCommand,
    CommandType.CHARGEBACK: ChargebackCommand,
}


def create_command(
    command_type: CommandType,
    client: ClientId,
    tx: TxId,
    amount: Amount | None = None,
) -> TxCommand:
    """타입에 맞는 Command 생성

    Args:
        command_type: 명령 종류
        client: 고객 ID
        tx: 거래 ID
        amount: 금액 (deposit/withdrawal 필수, 나머지는 무시)

    Returns:
        TxCommand 인스턴스

    Raises:
        InvalidCommandError: 필수 금액 누락 또는 음수 금액
    """
    cls = COMMAND_CLASSES[command_type]
    if not command_type.requires_amount:
        return cls(client=client, tx=tx)

    if amount is None:
        raise InvalidCommandError(f"{command_type.value} 금액이 없습니다")
    return cls(client=client, tx=tx, amount=amount)


def describe(command: TxCommand) -> dict[str, Any]:
    """로그용 요약 딕셔너리"""
    data: dict[str, Any] = {
        "type": command.command_type.value,
        "client": command.client,
        "tx": command.tx,
    }
    amount = getattr(command, "amount", None)
    if amount is not None:
        data["amount"] = str(amount)
    return data
