"""
ClassifierConfig 설정 관리 모듈

분류 실행에 필요한 모든 설정을 관리합니다.
JSON 파일에서 로드하고, 잘못된 값은 기본값으로 대체합니다.
.env 파일/환경변수(MOD_CLASSIFIER_*)로 경로와 로그 레벨을 덮어쓸 수 있습니다.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Any, Optional, Union
import json

from dotenv import load_dotenv

from mod_classifier.path_utils import resolve_path


# 유효한 로그 레벨
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}

DEFAULT_INPUT_FOLDER = "Input"
DEFAULT_OUTPUT_FOLDER = "Output"
DEFAULT_CATALOG_FILE = "mods_data.json"
DEFAULT_LOG_FILENAME = "mod_classifier.log"

# 환경변수 -> 설정 필드
ENV_OVERRIDES: Dict[str, str] = {
    'MOD_CLASSIFIER_INPUT': 'input_folder',
    'MOD_CLASSIFIER_OUTPUT': 'output_folder',
    'MOD_CLASSIFIER_CATALOG': 'catalog_file',
    'MOD_CLASSIFIER_LOG_DIR': 'log_dir',
    'MOD_CLASSIFIER_LOG_LEVEL': 'log_level',
}


@dataclass
class ClassifierConfig:
    """분류기 설정 데이터클래스"""

    input_folder: str = DEFAULT_INPUT_FOLDER
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    catalog_file: str = DEFAULT_CATALOG_FILE
    log_dir: str = ""                      # 비어 있으면 실행 파일 폴더
    log_filename: str = DEFAULT_LOG_FILENAME
    log_level: str = "INFO"
    log_append: bool = False               # False면 실행마다 로그 파일을 새로 작성
    dry_run: bool = False
    pause_on_exit: bool = True             # 종료 전 "아무 키나 누르세요"
    write_report: bool = False

    def __post_init__(self):
        """초기화 후 유효성 검증 및 기본값 적용"""
        self._validate_and_fix()

    def _validate_and_fix(self):
        """잘못된 값을 기본값으로 대체"""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            self.log_level = "INFO"
        else:
            self.log_level = self.log_level.upper()

        # 경로 값은 비어 있지 않은 문자열이어야 함
        for name, default in (
            ('input_folder', DEFAULT_INPUT_FOLDER),
            ('output_folder', DEFAULT_OUTPUT_FOLDER),
            ('catalog_file', DEFAULT_CATALOG_FILE),
            ('log_filename', DEFAULT_LOG_FILENAME),
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                setattr(self, name, default)

        if not isinstance(self.log_dir, str):
            self.log_dir = ""

        for name, default in (
            ('log_append', False),
            ('dry_run', False),
            ('pause_on_exit', True),
            ('write_report', False),
        ):
            if not isinstance(getattr(self, name), bool):
                setattr(self, name, default)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'input_folder': self.input_folder,
            'output_folder': self.output_folder,
            'catalog_file': self.catalog_file,
            'log_dir': self.log_dir,
            'log_filename': self.log_filename,
            'log_level': self.log_level,
            'log_append': self.log_append,
            'dry_run': self.dry_run,
            'pause_on_exit': self.pause_on_exit,
            'write_report': self.write_report
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClassifierConfig':
        """딕셔너리에서 ClassifierConfig 복원 (안전한 기본값 적용)"""
        return cls(
            input_folder=data.get('input_folder', DEFAULT_INPUT_FOLDER),
            output_folder=data.get('output_folder', DEFAULT_OUTPUT_FOLDER),
            catalog_file=data.get('catalog_file', DEFAULT_CATALOG_FILE),
            log_dir=data.get('log_dir', ""),
            log_filename=data.get('log_filename', DEFAULT_LOG_FILENAME),
            log_level=data.get('log_level', 'INFO'),
            log_append=data.get('log_append', False),
            dry_run=data.get('dry_run', False),
            pause_on_exit=data.get('pause_on_exit', True),
            write_report=data.get('write_report', False)
        )

    def to_json(self, indent: int = 2) -> str:
        """JSON 문자열로 직렬화"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> 'ClassifierConfig':
        """JSON 문자열에서 ClassifierConfig 복원"""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError:
            # JSON 파싱 실패 시 기본 설정 반환
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self, file_path: Path) -> None:
        """설정을 JSON 파일로 저장"""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())

    @classmethod
    def load(cls, file_path: Path) -> 'ClassifierConfig':
        """JSON 파일에서 설정 로드 (파일 없으면 기본값)"""
        file_path = Path(file_path)
        if not file_path.exists():
            return cls()

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return cls.from_json(f.read())
        except (OSError, UnicodeDecodeError):
            return cls()

    def apply_env_overrides(self, dotenv_path: Optional[Union[str, Path]] = None) -> 'ClassifierConfig':
        """
        .env 파일과 환경변수로 설정 덮어쓰기

        .env 값이 시스템 환경변수보다 우선합니다.

        Args:
            dotenv_path: .env 파일 경로 (None이면 현재 작업 디렉토리의 .env)

        Returns:
            self
        """
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=True)

        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                setattr(self, field_name, value)

        self._validate_and_fix()
        return self

    def input_path(self, base_dir: Optional[Path] = None) -> Path:
        """입력 폴더 경로"""
        return resolve_path(self.input_folder, base_dir)

    def output_path(self, base_dir: Optional[Path] = None) -> Path:
        """출력 루트 폴더 경로"""
        return resolve_path(self.output_folder, base_dir)

    def catalog_path(self, base_dir: Optional[Path] = None) -> Path:
        """카탈로그 파일 경로"""
        return resolve_path(self.catalog_file, base_dir)

    def log_path(self, app_dir: Path) -> Path:
        """
        로그 폴더 경로

        Args:
            app_dir: log_dir가 비어 있을 때 사용할 애플리케이션 폴더
        """
        if not self.log_dir:
            return Path(app_dir)
        return resolve_path(self.log_dir, app_dir)
