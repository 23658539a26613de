"""
어댑터 공통 데이터 모델

CSV 입력/출력 행을 표준화한 모델.
입력 행은 원본 문자열을 그대로 보관하고, Command 변환은 reader에서 수행.
"""

from dataclasses import dataclass

from core.ledger.models import Account
from core.types import ClientId


@dataclass(frozen=True)
class InputRow:
    """입력 CSV 행 (원본 문자열)

    Attributes:
        row_no: 데이터 행 번호 (1부터, 빈 줄과 필드 초과 행 제외)
        type: 명령 종류 문자열
        client: 고객 ID 문자열
        tx: 거래 ID 문자열
        amount: 금액 문자열 (없으면 None)
    """

    row_no: int
    type: str
    client: str
    tx: str
    amount: str | None = None


@dataclass(frozen=True)
class OutputRow:
    """출력 CSV 행

    Attributes:
        client: 고객 ID
        available: 사용 가능 잔고 (소수점 4자리 문자열)
        held: 동결 잔고
        total: 총 잔고
        locked: 잠금 여부
    """

    client: ClientId
    available: str
    held: str
    total: str
    locked: bool

    @staticmethod
    def from_account(client: ClientId, account: Account) -> "OutputRow":
        """Account 스냅샷에서 생성"""
        return OutputRow(
            client=client,
            available=str(account.available),
            held=str(account.held),
            total=str(account.total),
            locked=account.locked,
        )

    def to_dict(self) -> dict[str, object]:
        """딕셔너리로 변환 (직렬화용, locked는 소문자 true/false)"""
        return {
            "client": self.client,
            "available": self.available,
            "held": self.held,
            "total": self.total,
            "locked": "true" if self.locked else "false",
        }
