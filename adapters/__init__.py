"""
어댑터 레이어

외부 입출력(CSV 파일 등)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    IAccountSink,
    ICommandSource,
)
from adapters.models import (
    InputRow,
    OutputRow,
)

__all__ = [
    # Interfaces
    "ICommandSource",
    "IAccountSink",
    # Models
    "InputRow",
    "OutputRow",
]
