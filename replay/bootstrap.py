"""
Replay Bootstrap

설정 로드, 로깅 초기화, 입력 → 엔진 → 출력 연결.

실행 흐름:
1. 설정 로드 (replay.yaml + CLI 인자)
2. 로깅 초기화 (stderr + 선택적 파일)
3. CSV 행을 순서대로 Command로 변환하여 엔진에 적용
4. 최종 계좌 스냅샷을 CSV로 출력 (기본 stdout)

오류 정책:
- 잘못된 행: reader가 로그 후 건너뜀
- 금액 overflow: 해당 명령만 실패 로그, 다음 명령 계속
- 헤더 오류 / 파일 I/O 오류 / 설정 오류: 종료 코드 1
- 입금 후 total(available + held)이 i64를 넘으면 해당 입금만 실패
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from pandas.errors import ParserError

from adapters.csv_file import CsvAccountWriter, CsvCommandReader, CsvFormatError
from adapters.interfaces import IAccountSink, ICommandSource
from core.config.loader import ConfigLoadError, ReplayConfig, get_settings, level_number
from core.constants import Defaults
from core.domain.amount import AmountOverflowError
from core.domain.commands import describe
from core.ledger import TransactionEngine
from core.logging import setup_logging
from core.types import CommandOutcome

logger = logging.getLogger("replay")


@dataclass
class ReplayStats:
    """실행 통계

    Attributes:
        applied: 상태를 변경한 명령 수
        ignored: 적용 조건 불충족으로 무시된 명령 수
        failed: 금액 overflow로 실패한 명령 수
        skipped: 변환하지 못해 건너뛴 입력 행 수
    """

    applied: int = 0
    ignored: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def commands(self) -> int:
        """엔진에 전달된 명령 수"""
        return self.applied + self.ignored + self.failed


class ReplayRunner:
    """Replay 실행기

    Command 공급자에서 명령을 하나씩 꺼내 엔진에 적용.
    한 명령의 실패가 다른 명령 처리를 막지 않음.

    Args:
        source: Command 공급자
        engine: 거래 처리 엔진
    """

    def __init__(self, source: ICommandSource, engine: TransactionEngine):
        self.source = source
        self.engine = engine
        self.stats = ReplayStats()

    def run(self) -> ReplayStats:
        """전체 입력 처리

        Returns:
            실행 통계

        Raises:
            CsvFormatError, OSError: 입력 자체를 읽을 수 없는 경우
        """
        for command in self.source:
            try:
                outcome = self.engine.apply(command)
            except AmountOverflowError as e:
                self.stats.failed += 1
                logger.error(f"Command failed, continuing: {describe(command)}: {e}")
                continue

            if outcome == CommandOutcome.APPLIED:
                self.stats.applied += 1
            else:
                self.stats.ignored += 1

        self.stats.skipped = self.source.skipped_count
        return self.stats

    def write_report(self, sink: IAccountSink) -> int:
        """최종 계좌 스냅샷 출력

        Returns:
            출력한 계좌 수
        """
        return sink.write(self.engine.store.all_accounts())


def build_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="ledger-replay",
        description="거래 CSV를 재생하여 고객별 최종 잔고를 CSV로 출력",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="입력 거래 CSV 파일",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="출력 CSV 파일 (기본: stdout)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="설정 파일 경로 (기본: config/replay.yaml, 없으면 기본값)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="콘솔 로그 레벨 (DEBUG/INFO/WARNING/ERROR)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="파일 로그 디렉토리 (지정 시 파일 로그 활성화)",
    )
    return parser


def _configure_logging(config: ReplayConfig) -> None:
    log_config = config.logging
    setup_logging(
        Defaults.PROCESS_NAME,
        console_level=level_number(log_config.console_level),
        file_level=level_number(log_config.file_level),
        log_dir=log_config.log_dir if log_config.file_enabled else None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Replay 메인 함수

    Args:
        argv: CLI 인자 (None이면 sys.argv)

    Returns:
        종료 코드 (0: 성공, 1: 실패)
    """
    args = build_parser().parse_args(argv)

    # 1. 설정 로드
    try:
        settings = get_settings(args.config)
        config = settings.config.with_overrides(
            log_level=args.log_level,
            log_dir=args.log_dir,
        )
    except ConfigLoadError as e:
        _configure_logging(ReplayConfig())
        logger.error(f"설정 로드 실패: {e}")
        return 1

    # 2. 로깅 초기화
    _configure_logging(config)

    logger.info("=" * 60)
    logger.info("Ledger Replay 시작")
    logger.info("=" * 60)
    logger.info(f"Input: {args.input}")

    # 3. 입력 재생
    reader = CsvCommandReader(args.input, chunk_size=settings.csv_chunk_size)
    runner = ReplayRunner(reader, TransactionEngine())

    try:
        stats = runner.run()
    except (OSError, UnicodeDecodeError, CsvFormatError, ParserError) as e:
        logger.error(f"입력 처리 실패: {e}")
        return 1

    # 4. 결과 출력
    sink = CsvAccountWriter(args.output if args.output is not None else sys.stdout)
    try:
        written = runner.write_report(sink)
    except (OSError, AmountOverflowError) as e:
        logger.error(f"출력 실패: {e}")
        return 1

    store = runner.engine.store
    logger.info(
        f"Rows: {reader.rows_read} read, {stats.skipped} skipped | "
        f"Commands: {stats.applied} applied, {stats.ignored} ignored, {stats.failed} failed"
    )
    logger.info(
        f"Accounts: {store.account_count} ({written} written) | "
        f"Transactions: {store.transaction_count}"
    )
    logger.info("Ledger Replay 정상 종료")
    return 0


def cli() -> None:
    """콘솔 스크립트 진입점 (ledger-replay)"""
    sys.exit(main())


if __name__ == "__main__":
    cli()
