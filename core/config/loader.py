"""
설정 로더

replay.yaml 로드 및 실행 설정 생성
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths, PROJECT_ROOT


_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """로깅 설정

    불변 데이터 구조로 설정 변경 방지
    """

    console_level: str = Defaults.LOG_LEVEL
    file_enabled: bool = False
    file_level: str = Defaults.LOG_LEVEL
    log_dir: Path = Paths.LOGS_DIR


@dataclass(frozen=True)
class CsvConfig:
    """CSV 입력 설정"""

    chunk_size: int = Defaults.CSV_CHUNK_SIZE


@dataclass(frozen=True)
class ReplayConfig:
    """실행 설정 (replay.yaml에서 로드)"""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    csv: CsvConfig = field(default_factory=CsvConfig)

    def with_overrides(
        self,
        log_level: str | None = None,
        log_dir: Path | None = None,
    ) -> "ReplayConfig":
        """CLI 인자로 덮어쓴 새 설정 반환

        Args:
            log_level: 콘솔 로그 레벨
            log_dir: 로그 디렉토리 (지정 시 파일 로그 활성화)

        Returns:
            새 ReplayConfig 인스턴스

        Raises:
            ConfigLoadError: 유효하지 않은 로그 레벨
        """
        logging_config = self.logging
        if log_level is not None:
            logging_config = replace(logging_config, console_level=_parse_level(log_level))
        if log_dir is not None:
            logging_config = replace(logging_config, file_enabled=True, log_dir=Path(log_dir))
        return replace(self, logging=logging_config)


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _parse_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in _VALID_LEVELS:
        raise ConfigLoadError(
            f"유효하지 않은 로그 레벨입니다: '{value}'. 유효한 값: {list(_VALID_LEVELS)}"
        )
    return level


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"replay.yaml의 '{name}' 섹션은 매핑이어야 합니다")
    return section


def _parse_logging(section: dict[str, Any]) -> LoggingConfig:
    default = LoggingConfig()

    log_dir = Path(section.get("dir", default.log_dir))
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    return LoggingConfig(
        console_level=_parse_level(section.get("console_level", default.console_level)),
        file_enabled=bool(section.get("file_enabled", default.file_enabled)),
        file_level=_parse_level(section.get("file_level", default.file_level)),
        log_dir=log_dir,
    )


def _parse_csv(section: dict[str, Any]) -> CsvConfig:
    chunk_size = section.get("chunk_size", Defaults.CSV_CHUNK_SIZE)
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigLoadError(
            f"replay.yaml의 csv.chunk_size는 양의 정수여야 합니다: {chunk_size!r}"
        )
    return CsvConfig(chunk_size=chunk_size)


def load_config(path: Path | None = None) -> ReplayConfig:
    """replay.yaml 파일 로드

    Args:
        path: replay.yaml 경로 (None이면 기본 경로 사용, 기본 파일이 없으면 기본값)

    Returns:
        ReplayConfig 인스턴스

    Raises:
        ConfigLoadError: 지정한 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.CONFIG_FILE
        if not path.exists():
            return ReplayConfig()

    if not path.exists():
        raise ConfigLoadError(f"replay.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"replay.yaml 파싱 실패: {e}") from e

    # 빈 파일은 기본값
    if data is None:
        return ReplayConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError("replay.yaml 최상위는 매핑이어야 합니다")

    return ReplayConfig(
        logging=_parse_logging(_section(data, "logging")),
        csv=_parse_csv(_section(data, "csv")),
    )


def level_number(level: str) -> int:
    """로그 레벨 이름 → logging 모듈 숫자"""
    return logging.getLevelName(_parse_level(level))


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    replay.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: ReplayConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(config_path)

    @property
    def config(self) -> ReplayConfig:
        """로드된 전체 설정"""
        assert self._config is not None
        return self._config

    @property
    def csv_chunk_size(self) -> int:
        """CSV 청크 크기 (행 수)"""
        return self.config.csv.chunk_size

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: replay.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
