"""
타입 정의 모듈

Enum, 식별자 alias 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


# 식별자 (범위 검증은 입력 경계에서 수행)
ClientId = int  # u16
TxId = int  # u32


class TxKind(str, Enum):
    """기록되는 거래 종류 (입금/출금만 TxRecord 생성)"""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class DisputeState(str, Enum):
    """거래 분쟁 상태

    전이 규칙은 core.domain.state_machines.DisputeStateMachine 참조
    """

    NORMAL = "NORMAL"
    DISPUTED = "DISPUTED"
    CHARGED_BACK = "CHARGED_BACK"  # 종료 상태


class CommandType(str, Enum):
    """입력 명령 종류 (CSV type 컬럼 값)"""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def requires_amount(self) -> bool:
        """amount 컬럼 필수 여부"""
        return self in (CommandType.DEPOSIT, CommandType.WITHDRAWAL)


class CommandOutcome(str, Enum):
    """명령 처리 결과

    IGNORED는 에러가 아님 (중복 tx, 잠긴 계좌, 잔고 부족 등 비즈니스 규칙상 무시)
    """

    APPLIED = "APPLIED"
    IGNORED = "IGNORED"
