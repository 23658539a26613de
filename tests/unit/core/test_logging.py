"""
core/logging.py 테스트

루트 로거 핸들러 구성, 파일 로그 생성
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.logging import (
    LOG_FILE_BACKUP_COUNT,
    get_log_file_path,
    setup_logging,
)


def _own_handlers(root: logging.Logger) -> list[logging.Handler]:
    # pytest가 붙이는 캡처 핸들러 제외
    return [h for h in root.handlers if type(h) in (logging.StreamHandler, TimedRotatingFileHandler)]


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_console_only(self) -> None:
        """log_dir 없으면 stderr 핸들러만"""
        root = setup_logging("replay", console_level=logging.WARNING)

        handlers = _own_handlers(root)
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert handlers[0].level == logging.WARNING
        assert root.level == logging.DEBUG

    def test_with_file(self, temp_dir: Path) -> None:
        """log_dir 지정 시 파일 핸들러 추가"""
        log_dir = temp_dir / "logs"
        root = setup_logging("replay", file_level=logging.DEBUG, log_dir=log_dir)

        file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert file_handlers[0].backupCount == LOG_FILE_BACKUP_COUNT
        assert log_dir.is_dir()

        logging.getLogger("replay.test").info("hello")
        file_handlers[0].flush()

        content = get_log_file_path("replay", log_dir).read_text(encoding="utf-8")
        assert "hello" in content
        assert "replay.test" in content

    def test_repeated_setup_does_not_duplicate(self) -> None:
        """재호출 시 핸들러 중복 없음"""
        setup_logging("replay")
        root = setup_logging("replay")

        assert len(_own_handlers(root)) == 1


class TestGetLogFilePath:
    """get_log_file_path 테스트"""

    def test_path(self, temp_dir: Path) -> None:
        """프로세스 이름 기반 파일명"""
        assert get_log_file_path("replay", temp_dir) == temp_dir / "replay.log"
