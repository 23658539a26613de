"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → ledger-replay/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class AmountLimits:
    """고정소수점 금액 상수

    금액은 SCALE 배 한 i64 정수로 저장 (소수점 4자리).
    """

    SCALE: int = 10_000
    FRACTION_DIGITS: int = 4

    # i64 범위 (overflow 검사 기준)
    I64_MIN: int = -(2**63)
    I64_MAX: int = 2**63 - 1


class IdLimits:
    """식별자 범위 상수"""

    CLIENT_ID_MAX: int = 2**16 - 1  # u16
    TX_ID_MAX: int = 2**32 - 1  # u32


class CsvColumns:
    """CSV 컬럼명 (입력/출력)"""

    TYPE: str = "type"
    CLIENT: str = "client"
    TX: str = "tx"
    AMOUNT: str = "amount"

    REQUIRED_INPUT: tuple[str, ...] = (TYPE, CLIENT, TX)
    OUTPUT: tuple[str, ...] = ("client", "available", "held", "total", "locked")


class Defaults:
    """기본값 상수"""

    PROCESS_NAME: str = "replay"
    LOG_LEVEL: str = "INFO"
    CSV_CHUNK_SIZE: int = 10_000


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    CONFIG_FILE: Path = CONFIG_DIR / "replay.yaml"
