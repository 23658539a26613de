"""
pytest 공통 fixture 정의

임시 디렉토리, 입력 CSV / 설정 파일 생성, Settings 싱글턴 초기화
"""

import logging
import tempfile
from pathlib import Path
from typing import Callable

import pytest

from core.config.loader import Settings


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """테스트마다 Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture(autouse=True)
def restore_root_logger() -> None:
    """setup_logging이 추가한 루트 핸들러 정리"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def write_csv(temp_dir: Path) -> Callable[..., Path]:
    """입력 CSV 파일 생성 팩토리

    사용 예시:
        path = write_csv("type,client,tx,amount", "deposit,1,1,1.0")
    """

    def _write(*lines: str, name: str = "transactions.csv") -> Path:
        path = temp_dir / name
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(temp_dir: Path) -> Callable[[str], Path]:
    """replay.yaml 파일 생성 팩토리"""

    def _write(content: str, name: str = "replay.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
