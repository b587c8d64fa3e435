"""
ClassifierLogger 로깅 모듈

분류 실행 중 발생하는 모든 판단(복사, 중복 건너뜀, 매칭 실패, 복사 실패)을 기록합니다.
콘솔과 파일 출력을 동시에 지원하며, 실행할 때마다 로그 파일을 새로 쓰거나
(기본값) 로테이션하며 이어 쓸 수 있습니다.

로거는 분류기/카탈로그 로더에 주입되어 사용되며, 전역 상태를 갖지 않습니다.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


# 로그 파일 기본 설정
DEFAULT_LOG_FILENAME = "mod_classifier.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class _MaxLevelFilter(logging.Filter):
    """지정 레벨 미만의 레코드만 통과"""

    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


class ClassifierLogger:
    """분류기 전용 로거 클래스"""

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Optional[Path] = None,
        log_filename: str = DEFAULT_LOG_FILENAME,
        append: bool = False,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        console_output: bool = True,
        file_output: bool = True
    ):
        """
        ClassifierLogger 초기화

        Args:
            log_level: 콘솔 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_dir: 로그 파일 저장 디렉토리 (None이면 현재 디렉토리)
            log_filename: 로그 파일명
            append: True면 이어 쓰기 + 로테이션, False면 실행마다 새로 작성
            max_bytes: 이어 쓰기 모드에서 로그 파일 최대 크기 (기본 10MB)
            backup_count: 이어 쓰기 모드에서 백업 파일 개수
            console_output: 콘솔 출력 여부
            file_output: 파일 출력 여부
        """
        self.log_level = self._validate_log_level(log_level)
        self.log_dir = Path(log_dir) if log_dir is not None else Path(".")
        self.log_filename = log_filename
        self.append = append
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.console_output = console_output
        self.file_output = file_output

        self._logger = self._setup_logger()

    def _validate_log_level(self, level: str) -> str:
        """로그 레벨 유효성 검증"""
        level_upper = str(level).upper()
        return level_upper if level_upper in VALID_LOG_LEVELS else "INFO"

    def _get_log_level_int(self) -> int:
        """문자열 로그 레벨을 logging 모듈 상수로 변환"""
        return getattr(logging, self.log_level, logging.INFO)

    def _setup_logger(self) -> logging.Logger:
        """로거 설정 및 핸들러 추가"""
        # 인스턴스마다 고유한 로거 이름 (테스트 시 충돌 방지)
        logger = logging.getLogger(f"mod_classifier.run_{id(self)}")
        # 모든 레코드가 핸들러에 도달하도록 DEBUG로 두고, 핸들러별로 필터링
        logger.setLevel(logging.DEBUG)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if self.file_output:
            self._setup_file_handler(logger, formatter)

        if self.console_output:
            self._setup_console_handlers(logger, formatter)

        return logger

    def _setup_file_handler(self, logger: logging.Logger, formatter: logging.Formatter):
        """파일 핸들러 설정 (항상 DEBUG까지 기록)"""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_path = self.log_dir / self.log_filename

        if self.append:
            file_handler = RotatingFileHandler(
                filename=log_path,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
        else:
            file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    def _setup_console_handlers(self, logger: logging.Logger, formatter: logging.Formatter):
        """콘솔 핸들러 설정 (INFO 이하는 stdout, WARNING 이상은 stderr)"""
        level = self._get_log_level_int()

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(level)
        stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))
        stdout_handler.setFormatter(formatter)
        logger.addHandler(stdout_handler)

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(max(level, logging.WARNING))
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    @property
    def log_file_path(self) -> Path:
        """현재 로그 파일 경로 반환"""
        return self.log_dir / self.log_filename

    def debug(self, message: str):
        """DEBUG 레벨 로그"""
        self._logger.debug(message)

    def info(self, message: str):
        """INFO 레벨 로그"""
        self._logger.info(message)

    def warning(self, message: str):
        """WARNING 레벨 로그"""
        self._logger.warning(message)

    def error(self, message: str, exc_info: bool = True):
        """
        ERROR 레벨 로그

        Args:
            message: 에러 메시지
            exc_info: 처리 중인 예외가 있으면 스택 트레이스 포함 (기본 True)
        """
        self._logger.error(message, exc_info=exc_info and sys.exc_info()[0] is not None)

    def log_copied(self, file_name: str, normalized_name: str, category_dir: str):
        """분류 후 복사 완료 로그"""
        self.info(f"[COPY] {file_name} (정규화 이름: {normalized_name}) -> {category_dir}")

    def log_planned(self, file_name: str, normalized_name: str, destination: Path):
        """dry-run 복사 예정 로그"""
        self.info(f"[DRY-RUN] {file_name} (정규화 이름: {normalized_name}) -> {destination}")

    def log_skipped_existing(self, file_name: str, category_dir: str):
        """대상 폴더에 이미 존재하여 건너뜀 로그"""
        self.info(f"[SKIP] {file_name}: 이미 대상 폴더에 존재합니다 ({category_dir})")

    def log_unmatched(self, file_name: str, normalized_name: str):
        """카탈로그 매칭 실패 로그"""
        self.warning(
            f"[UNMATCHED] 카탈로그에서 분류 정보를 찾을 수 없습니다: "
            f"{file_name} (정규화 이름: {normalized_name})"
        )

    def log_copy_error(self, file_name: str, destination: Path, error: Exception):
        """복사 실패 로그"""
        self.error(
            f"[ERROR] 복사 실패: {file_name} -> {destination} - {type(error).__name__}: {error}",
            exc_info=False
        )

    def log_run_start(self, input_folder: str, total_files: int, catalog_size: int):
        """분류 시작 로그"""
        self.info(f"{'='*60}")
        self.info(f"Mod 분류 시작: {input_folder}")
        self.info(f"처리할 파일 수: {total_files} / 카탈로그 항목 수: {catalog_size}")
        self.info(f"{'='*60}")

    def log_run_complete(self, copied: int, skipped: int, unmatched: int, failed: int):
        """분류 완료 로그"""
        self.info(f"{'='*60}")
        self.info("Mod 분류 완료")
        self.info(f"  복사: {copied}")
        self.info(f"  건너뜀: {skipped}")
        self.info(f"  매칭 실패: {unmatched}")
        self.info(f"  복사 실패: {failed}")
        self.info(f"{'='*60}")

    def close(self):
        """로거 핸들러 정리"""
        for handler in self._logger.handlers[:]:
            handler.close()
            self._logger.removeHandler(handler)

