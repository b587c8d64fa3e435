"""
Mod Classifier

입력 폴더의 Mod 파일을 정규화 이름으로 카탈로그와 매칭하고,
카테고리별 출력 폴더로 복사하는 메인 컨트롤러입니다.

핵심 동작:
- 출력 폴더 구조 준비 (루트 + 카테고리별 하위 폴더)
- 결함 격리: 개별 파일 복사 실패 시 해당 파일만 실패 처리하고 계속 진행
- 재실행 안정성: 대상 경로에 이미 파일이 있으면 건너뜀 (파일이 아닌 항목이 있으면 실패 처리)
- 매칭 실패 파일은 어디에도 복사하지 않고 기록만 남김
- Dry-run 모드: 출력 폴더 구조만 만들고 파일은 복사하지 않음
"""
import csv
import shutil
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
from datetime import datetime

from mod_classifier.catalog import Catalog
from mod_classifier.classifier_logger import ClassifierLogger
from mod_classifier.errors import OutputSetupError
from mod_classifier.mod_category import ModCategory
from mod_classifier.mod_file import (
    ModFile,
    STATUS_COPIED,
    STATUS_PLANNED,
    STATUS_SKIPPED,
    STATUS_UNMATCHED,
    STATUS_FAILED,
)
from mod_classifier.name_normalizer import NameNormalizer


REPORT_COLUMNS = ['file_name', 'normalized_name', 'category', 'status', 'destination', 'error_message']


@dataclass
class ClassificationResult:
    """분류 실행 결과"""
    total_files: int = 0
    copied: int = 0
    planned: int = 0
    skipped: int = 0
    unmatched: int = 0
    failed: int = 0
    files: List[ModFile] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    report_path: Optional[Path] = None

    @property
    def unmatched_files(self) -> List[ModFile]:
        """카탈로그에 없는 파일 목록"""
        return [f for f in self.files if f.status == STATUS_UNMATCHED]

    def record(self, mod_file: ModFile):
        """파일 하나의 처리 결과 집계"""
        self.files.append(mod_file)
        if mod_file.status == STATUS_COPIED:
            self.copied += 1
        elif mod_file.status == STATUS_PLANNED:
            self.planned += 1
        elif mod_file.status == STATUS_SKIPPED:
            self.skipped += 1
        elif mod_file.status == STATUS_UNMATCHED:
            self.unmatched += 1
        elif mod_file.status == STATUS_FAILED:
            self.failed += 1
            self.errors.append(f"{mod_file.file_name}: {mod_file.error_message}")


class ModClassifier:
    """Mod 파일 분류/복사 컨트롤러"""

    def __init__(
        self,
        output_root: Path,
        logger: Optional[ClassifierLogger] = None,
        dry_run: bool = False,
        normalizer: Optional[NameNormalizer] = None
    ):
        """
        Args:
            output_root: 출력 루트 폴더
            logger: 분류 로거 (없으면 콘솔 전용 로거 생성)
            dry_run: True면 복사하지 않고 미리보기만
            normalizer: 파일명 정규화기 (없으면 기본 규칙 사용)
        """
        self.output_root = Path(output_root)
        self.logger = logger or ClassifierLogger(file_output=False)
        self.dry_run = dry_run
        self.normalizer = normalizer or NameNormalizer()

    def category_dir(self, category: ModCategory) -> Path:
        """카테고리 출력 폴더 경로"""
        return self.output_root / category.directory_name

    def ensure_output_tree(self):
        """
        출력 루트와 카테고리별 하위 폴더 생성 (이미 있으면 무시)

        Raises:
            OutputSetupError: 폴더를 만들 수 없는 경우
        """
        targets = [self.output_root] + [self.category_dir(c) for c in ModCategory]
        for target in targets:
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.logger.error(f"출력 폴더를 생성할 수 없습니다: {target} - {e}", exc_info=False)
                raise OutputSetupError(f"출력 폴더를 생성할 수 없습니다: {target}") from e

    def scan_input(self, input_dir: Path) -> List[ModFile]:
        """
        입력 폴더의 일반 파일 목록 수집 (하위 폴더는 탐색하지 않음)

        Args:
            input_dir: 입력 폴더

        Returns:
            발견된 ModFile 목록 (폴더 열거 순서)
        """
        input_dir = Path(input_dir)
        mod_files = []
        for entry in input_dir.iterdir():
            if entry.is_file():
                mod_files.append(ModFile.from_path(entry))
                self.logger.debug(f"파일 발견: {entry.name}")
            else:
                self.logger.debug(f"파일이 아니므로 무시: {entry.name}")
        return mod_files

    def classify(self, catalog: Catalog, mod_files: List[ModFile]) -> ClassificationResult:
        """
        파일 목록을 카탈로그 기준으로 분류

        Args:
            catalog: Mod 카탈로그
            mod_files: 분류할 파일 목록

        Returns:
            ClassificationResult
        """
        result = ClassificationResult(total_files=len(mod_files))
        for mod_file in mod_files:
            result.record(self.classify_file(catalog, mod_file))
        return result

    def classify_file(self, catalog: Catalog, mod_file: ModFile) -> ModFile:
        """
        파일 하나를 정규화 -> 조회 -> 복사

        Args:
            catalog: Mod 카탈로그
            mod_file: 분류할 파일

        Returns:
            상태가 갱신된 ModFile
        """
        trace = self.normalizer.normalize_with_trace(mod_file.file_name)
        mod_file.normalized_name = trace.result
        if trace.steps:
            self.logger.debug(
                f"정규화: {mod_file.file_name} -> {trace.result} "
                f"({', '.join(name for name, _ in trace.steps)})"
            )

        category = catalog.lookup(mod_file.normalized_name)
        if category is None:
            mod_file.status = STATUS_UNMATCHED
            self.logger.log_unmatched(mod_file.file_name, mod_file.normalized_name)
            return mod_file

        mod_file.category = category
        return self.categorize(mod_file, category)

    def categorize(self, mod_file: ModFile, category: ModCategory) -> ModFile:
        """
        매칭된 파일을 카테고리 폴더로 복사

        대상 경로에는 정규화 이름이 아닌 원본 파일명을 그대로 사용합니다.

        Args:
            mod_file: 매칭된 파일
            category: 매칭된 카테고리

        Returns:
            상태가 갱신된 ModFile
        """
        destination = self.category_dir(category) / mod_file.file_name
        mod_file.destination = destination

        if destination.is_file():
            mod_file.status = STATUS_SKIPPED
            self.logger.log_skipped_existing(mod_file.file_name, category.directory_name)
            return mod_file

        # 같은 이름의 폴더 등이 있으면 그 안으로 복사되지 않도록 실패 처리
        if destination.exists():
            return self._mark_failed(
                mod_file, destination,
                FileExistsError(f"대상 경로에 파일이 아닌 항목이 있습니다: {destination}")
            )

        if self.dry_run:
            mod_file.status = STATUS_PLANNED
            self.logger.log_planned(mod_file.file_name, mod_file.normalized_name, destination)
            return mod_file

        try:
            shutil.copy2(mod_file.source_path, destination)
        except OSError as e:
            return self._mark_failed(mod_file, destination, e)

        mod_file.status = STATUS_COPIED
        self.logger.log_copied(mod_file.file_name, mod_file.normalized_name, category.directory_name)
        return mod_file

    def _mark_failed(self, mod_file: ModFile, destination: Path, error: OSError) -> ModFile:
        """복사 실패 상태 기록"""
        mod_file.status = STATUS_FAILED
        mod_file.error_message = f"{type(error).__name__}: {error}"
        self.logger.log_copy_error(mod_file.file_name, destination, error)
        return mod_file

    def run(self, input_dir: Path, catalog: Catalog, write_report: bool = False) -> ClassificationResult:
        """
        전체 분류 실행

        Args:
            input_dir: 입력 폴더
            catalog: Mod 카탈로그
            write_report: True면 출력 루트에 CSV 보고서 생성

        Returns:
            ClassificationResult

        Raises:
            OutputSetupError: 출력 폴더 구조를 만들 수 없는 경우
        """
        input_dir = Path(input_dir)
        self.logger.info(f"Dry-run 모드: {'활성화' if self.dry_run else '비활성화'}")

        self.ensure_output_tree()
        mod_files = self.scan_input(input_dir)

        self.logger.log_run_start(str(input_dir), len(mod_files), len(catalog))
        if not mod_files:
            self.logger.warning("입력 폴더에 처리할 파일이 없습니다.")

        result = self.classify(catalog, mod_files)

        if write_report:
            result.report_path = self._write_report(result.files)

        self.logger.log_run_complete(result.copied, result.skipped, result.unmatched, result.failed)
        return result

    def _write_report(self, mod_files: List[ModFile]) -> Optional[Path]:
        """
        분류 결과 CSV 생성

        Args:
            mod_files: 처리된 파일 목록

        Returns:
            생성된 CSV 경로 (실패 시 None)
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        csv_path = self.output_root / f"classification_{timestamp}.csv"

        try:
            with open(csv_path, 'w', newline='', encoding='utf-8-sig') as f:
                writer = csv.writer(f)
                writer.writerow(REPORT_COLUMNS)
                for mod_file in mod_files:
                    row = mod_file.to_dict()
                    writer.writerow([row[column] for column in REPORT_COLUMNS])
        except OSError as e:
            self.logger.error(f"보고서 생성 실패: {csv_path} - {e}", exc_info=False)
            return None

        self.logger.info(f"분류 보고서 생성: {csv_path}")
        return csv_path
