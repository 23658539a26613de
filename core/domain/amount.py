"""
고정소수점 금액

i64 정수에 SCALE(10,000)을 곱해 소수점 4자리까지 정확하게 표현.
모든 산술 연산은 i64 범위를 검사하며, 범위를 벗어나면 예외 발생 (wrap 없음).
"""

from dataclasses import dataclass
from enum import Enum

from core.constants import AmountLimits


_DIGITS = frozenset("0123456789")


class AmountOverflowError(ArithmeticError):
    """금액 연산 overflow/underflow

    명령 처리 중 발생하면 해당 명령만 실패 처리 (전체 실행은 계속).
    """
    pass


class AmountParseErrorKind(str, Enum):
    """금액 파싱 실패 사유"""

    EMPTY = "EMPTY"
    MALFORMED_INT = "MALFORMED_INT"
    MALFORMED_FRAC = "MALFORMED_FRAC"
    OVERFLOW = "OVERFLOW"


class AmountParseError(ValueError):
    """금액 문자열 파싱 오류

    Attributes:
        kind: 실패 사유
        raw: 원본 입력 문자열
    """

    def __init__(self, kind: AmountParseErrorKind, raw: str):
        self.kind = kind
        self.raw = raw
        super().__init__(f"금액 파싱 실패 ({kind.value}): {raw!r}")


def _is_digits(s: str) -> bool:
    return bool(s) and all(c in _DIGITS for c in s)


def _check_range(value: int) -> int:
    if value < AmountLimits.I64_MIN or value > AmountLimits.I64_MAX:
        raise AmountOverflowError(f"금액 범위 초과: {value}")
    return value


@dataclass(frozen=True, order=True)
class Amount:
    """고정소수점 금액 (불변)

    Attributes:
        value: SCALE 배 한 정수 값 (예: 1.5 → 15000)

    사용 예시:
    ```python
    a = Amount.parse("1.5")
    b = a + Amount.parse("0.25")
    str(b)  # "1.7500"
    ```
    """

    value: int = 0

    def __post_init__(self) -> None:
        _check_range(self.value)

    @classmethod
    def zero(cls) -> "Amount":
        return cls(0)

    @classmethod
    def parse(cls, s: str) -> "Amount":
        """소수 문자열 파싱

        - 앞뒤 공백 제거, 선택적 부호(+/-)
        - 소수부는 4자리로 자르거나 0으로 채움
        - 5번째 자리가 '5' 이상이면 4번째 자리 반올림 (half-up)

        Args:
            s: 소수 문자열 (예: "123.45675")

        Returns:
            Amount (예: value=1234568)

        Raises:
            AmountParseError: 빈 값, 숫자 아닌 문자, 범위 초과
        """
        raw = s
        s = s.strip()
        if not s:
            raise AmountParseError(AmountParseErrorKind.EMPTY, raw)

        negative = s[0] == "-"
        if s[0] in "+-":
            s = s[1:]

        int_part, _, frac_src = s.partition(".")
        if not _is_digits(int_part):
            raise AmountParseError(AmountParseErrorKind.MALFORMED_INT, raw)
        if frac_src and not _is_digits(frac_src):
            raise AmountParseError(AmountParseErrorKind.MALFORMED_FRAC, raw)

        digits = AmountLimits.FRACTION_DIGITS
        keep, rest = frac_src[:digits], frac_src[digits:]
        frac = int(keep.ljust(digits, "0"))

        # 첫 번째 버려지는 자리 기준 half-up
        if rest and rest[0] >= "5":
            frac += 1

        value = int(int_part) * AmountLimits.SCALE + frac
        if value > AmountLimits.I64_MAX:
            raise AmountParseError(AmountParseErrorKind.OVERFLOW, raw)

        return cls(-value if negative else value)

    def checked_add(self, other: "Amount") -> "Amount":
        """덧셈 (i64 범위 검사)

        Raises:
            AmountOverflowError: 결과가 i64 범위를 벗어난 경우
        """
        return Amount(_check_range(self.value + other.value))

    def checked_sub(self, other: "Amount") -> "Amount":
        """뺄셈 (i64 범위 검사)

        Raises:
            AmountOverflowError: 결과가 i64 범위를 벗어난 경우
        """
        return Amount(_check_range(self.value - other.value))

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return self.checked_add(other)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return self.checked_sub(other)

    def is_negative(self) -> bool:
        return self.value < 0

    def __str__(self) -> str:
        """부호 + 정수부 + 4자리 소수부 (예: -1234567 → "-123.4567")"""
        sign = "-" if self.value < 0 else ""
        integer, frac = divmod(abs(self.value), AmountLimits.SCALE)
        return f"{sign}{integer}.{frac:0{AmountLimits.FRACTION_DIGITS}d}"
