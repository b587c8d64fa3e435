"""
Mod 카탈로그 로더

사용자가 관리하는 mods_data.json 파일에서 (정규화 이름 -> 카테고리) 목록을 읽고,
분류에 사용할 조회 테이블을 만듭니다.

파일 형식:
    [
        {"name": "examplemod.jar", "type": "client_only"},
        {"name": "jei.jar", "type": "client_optional_server_optional"}
    ]

잘못된 항목은 경고 후 건너뛰고, 루트가 배열이 아니거나 파싱에 실패하면
빈 카탈로그로 계속 진행합니다.
"""
import json
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from mod_classifier.mod_category import ModCategory
from mod_classifier.classifier_logger import ClassifierLogger
from mod_classifier.name_normalizer import normalize
from mod_classifier.errors import CatalogFileError


DEFAULT_CATALOG_FILENAME = "mods_data.json"


@dataclass(frozen=True)
class CatalogEntry:
    """카탈로그 항목 (정규화 이름 + 카테고리)"""
    name: str                 # 소문자 정규화 이름 (확장자 포함)
    category: ModCategory


class Catalog:
    """읽기 전용 Mod 카탈로그"""

    def __init__(self, entries: Optional[List[CatalogEntry]] = None, logger: Optional[ClassifierLogger] = None):
        """
        Args:
            entries: 카탈로그 항목 목록
            logger: 로거 (없으면 콘솔 전용 로거 생성)
        """
        self.logger = logger or ClassifierLogger(file_output=False)
        self.entries: List[CatalogEntry] = list(entries or [])
        self._table = self._build_lookup_table()

    def _build_lookup_table(self) -> Dict[str, ModCategory]:
        """
        이름 -> 카테고리 조회 테이블 생성

        같은 이름이 여러 번 나오면 마지막 항목이 사용됩니다.
        """
        table: Dict[str, ModCategory] = {}
        for entry in self.entries:
            previous = table.get(entry.name)
            if previous is not None and previous != entry.category:
                self.logger.warning(
                    f"카탈로그 중복 항목: {entry.name} "
                    f"({previous.directory_name} -> {entry.category.directory_name}), 마지막 항목을 사용합니다."
                )
            table[entry.name] = entry.category
        return table

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, normalized_name: str) -> Optional[ModCategory]:
        """정규화 이름으로 카테고리 조회 (없으면 None)"""
        return self._table.get(normalized_name)

    @classmethod
    def from_records(cls, data: Any, logger: Optional[ClassifierLogger] = None) -> 'Catalog':
        """
        JSON에서 읽은 데이터로 카탈로그 생성

        Args:
            data: json.load 결과 (배열이어야 함)
            logger: 로거

        Returns:
            Catalog (루트가 배열이 아니면 빈 카탈로그)
        """
        logger = logger or ClassifierLogger(file_output=False)

        if not isinstance(data, list):
            logger.error(
                "카탈로그 파일의 루트가 배열이 아닙니다. "
                "mods_data.json의 최상위 요소는 JSON 배열이어야 합니다.",
                exc_info=False
            )
            return cls([], logger)

        entries: List[CatalogEntry] = []
        for index, item in enumerate(data):
            entry = _parse_record(index, item, logger)
            if entry is not None:
                entries.append(entry)

        return cls(entries, logger)

    @classmethod
    def load(cls, file_path: Path, logger: Optional[ClassifierLogger] = None) -> 'Catalog':
        """
        카탈로그 파일 로드 (읽기/파싱 실패 시 빈 카탈로그)

        Args:
            file_path: mods_data.json 경로
            logger: 로거

        Returns:
            Catalog
        """
        logger = logger or ClassifierLogger(file_output=False)
        file_path = Path(file_path)

        try:
            # BOM이 붙은 파일(Windows 메모장 등)도 허용
            with open(file_path, 'r', encoding='utf-8-sig') as f:
                data = json.load(f)
        except OSError as e:
            logger.error(f"카탈로그 파일을 열 수 없습니다: {file_path} - {e}", exc_info=False)
            return cls([], logger)
        except ValueError as e:
            logger.error(f"카탈로그 파일 파싱 실패: {file_path} - {e}", exc_info=False)
            return cls([], logger)

        catalog = cls.from_records(data, logger)
        logger.info(f"카탈로그 로드 완료: {file_path} ({len(catalog)}개 항목)")
        return catalog


def _parse_record(index: int, item: Any, logger: ClassifierLogger) -> Optional[CatalogEntry]:
    """카탈로그 레코드 하나를 CatalogEntry로 변환 (잘못된 레코드는 None)"""
    if not isinstance(item, dict) or 'name' not in item or 'type' not in item:
        logger.warning(
            f"잘못된 카탈로그 항목을 건너뜁니다 (#{index}): "
            f"각 항목은 'name'과 'type' 필드를 가진 객체여야 합니다."
        )
        return None

    name, type_token = item['name'], item['type']
    if not isinstance(name, str) or not isinstance(type_token, str):
        logger.warning(f"잘못된 카탈로그 항목을 건너뜁니다 (#{index}): 'name'과 'type'은 문자열이어야 합니다.")
        return None

    name = name.lower()
    if not ModCategory.is_known_token(type_token):
        logger.warning(f"알 수 없는 type '{type_token}' ({name}), Unknown으로 분류합니다.")

    normalized = normalize(name)
    if normalized != name:
        logger.warning(
            f"카탈로그 이름 '{name}'은(는) 정규화 결과 '{normalized}'와 달라 "
            f"어떤 파일과도 매칭되지 않습니다."
        )

    return CatalogEntry(name=name, category=ModCategory.from_token(type_token))


def ensure_catalog_file(file_path: Path, logger: Optional[ClassifierLogger] = None) -> bool:
    """
    카탈로그 파일이 없으면 빈 배열로 생성

    Args:
        file_path: mods_data.json 경로
        logger: 로거

    Returns:
        새로 생성했으면 True, 이미 있으면 False

    Raises:
        CatalogFileError: 경로가 파일이 아니거나 생성에 실패한 경우
    """
    logger = logger or ClassifierLogger(file_output=False)
    file_path = Path(file_path)

    if file_path.exists():
        if not file_path.is_file():
            raise CatalogFileError(f"'{file_path}' 경로가 존재하지만 파일이 아닙니다.")
        return False

    logger.info(f"'{file_path.name}' 파일이 없어 빈 배열로 생성합니다...")
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write("[]")
    except OSError as e:
        raise CatalogFileError(f"'{file_path}' 파일을 생성할 수 없습니다: {e}") from e

    logger.info(f"'{file_path.name}' 파일을 생성했습니다.")
    return True
