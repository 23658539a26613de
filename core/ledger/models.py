"""
Ledger 데이터 모델

Account(고객 계좌)와 TxRecord(입금/출금 기록) 정의.
LedgerStore만 이 객체들을 소유하고 변경함.
"""

from dataclasses import dataclass, field

from core.domain.amount import Amount
from core.types import ClientId, DisputeState, TxKind


@dataclass
class Account:
    """고객 계좌

    Attributes:
        available: 사용 가능 잔고 (출금/분쟁 가능)
        held: 분쟁으로 동결된 잔고
        locked: 차지백 발생 여부 (한 번 True가 되면 해제 불가)
    """

    available: Amount = field(default_factory=Amount.zero)
    held: Amount = field(default_factory=Amount.zero)
    locked: bool = False

    @property
    def total(self) -> Amount:
        """총 잔고 (available + held)"""
        return self.available.checked_add(self.held)


@dataclass
class TxRecord:
    """입금/출금 기록

    Attributes:
        client: 소유 고객 ID
        kind: 거래 종류 (DEPOSIT/WITHDRAWAL)
        amount: 원래 금액 (양수)
        state: 분쟁 상태
    """

    client: ClientId
    kind: TxKind
    amount: Amount
    state: DisputeState = DisputeState.NORMAL
