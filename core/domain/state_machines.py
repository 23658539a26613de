"""
State Machines

거래(TxRecord) 분쟁 상태 전이 관리.
"""

import logging
from enum import Enum

from core.types import DisputeState

logger = logging.getLogger(__name__)


class StateMachineError(Exception):
    """상태 전이 오류"""
    pass


def _value(state: str | Enum) -> str:
    return state.value if isinstance(state, Enum) else state


class DisputeStateMachine:
    """분쟁 상태 머신

    전이 규칙:
    - NORMAL → DISPUTED: 분쟁 제기 (dispute)
    - DISPUTED → NORMAL: 분쟁 해소 (resolve)
    - DISPUTED → CHARGED_BACK: 차지백 (chargeback, 종료 상태)

    상태는 TxRecord가 보유하며, 이 클래스는 전이 규칙만 제공.
    """

    TRANSITIONS: dict[str, list[str]] = {
        "NORMAL": ["DISPUTED"],
        "DISPUTED": ["NORMAL", "CHARGED_BACK"],
        "CHARGED_BACK": [],
    }

    @classmethod
    def can_transition(cls, from_state: str | Enum, to_state: str | Enum) -> bool:
        """전이 가능 여부 확인

        Args:
            from_state: 현재 상태
            to_state: 목표 상태

        Returns:
            전이 가능 여부
        """
        allowed = cls.TRANSITIONS.get(_value(from_state), [])
        return _value(to_state) in allowed

    @classmethod
    def transition(cls, from_state: str | Enum, to_state: str | Enum) -> DisputeState:
        """상태 전이

        Args:
            from_state: 현재 상태
            to_state: 목표 상태

        Returns:
            새 상태

        Raises:
            StateMachineError: 허용되지 않은 전이
        """
        source = _value(from_state)
        target = _value(to_state)

        if not cls.can_transition(source, target):
            allowed = cls.TRANSITIONS.get(source, [])
            raise StateMachineError(
                f"DisputeStateMachine: Cannot transition from {source} to {target}. "
                f"Allowed: {allowed}"
            )

        logger.debug(f"DisputeStateMachine: {source} → {target}")
        return DisputeState(target)
