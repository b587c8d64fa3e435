"""
ModFile 데이터 모델

입력 폴더에서 발견된 Mod 파일 하나와, 분류 과정에서 채워지는 결과 상태를 담습니다.
원본 파일 자체는 절대 변경되지 않습니다.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Dict, Any

from mod_classifier.mod_category import ModCategory


# 처리 상태
STATUS_PENDING = "pending"
STATUS_COPIED = "copied"        # 대상 폴더로 복사됨
STATUS_PLANNED = "planned"      # dry-run: 복사 예정
STATUS_SKIPPED = "skipped"      # 대상 경로에 이미 존재
STATUS_UNMATCHED = "unmatched"  # 카탈로그에 없음
STATUS_FAILED = "failed"        # 복사 실패


@dataclass
class ModFile:
    """분류 대상 Mod 파일"""
    
    source_path: Path                       # 입력 폴더 내 원본 경로
    file_name: str                          # 확장자 포함 원본 파일명
    
    # 분류 결과
    normalized_name: str = ""               # 정규화 키
    category: Optional[ModCategory] = None  # 매칭된 카테고리 (없으면 None)
    status: str = STATUS_PENDING
    destination: Optional[Path] = None      # 복사 대상 경로
    error_message: str = ""
    
    @classmethod
    def from_path(cls, path: Path) -> 'ModFile':
        """파일 경로에서 ModFile 생성"""
        path = Path(path)
        return cls(source_path=path, file_name=path.name)
    
    def to_dict(self) -> Dict[str, Any]:
        """CSV 보고서 행을 위한 딕셔너리 변환"""
        return {
            'source_path': str(self.source_path),
            'file_name': self.file_name,
            'normalized_name': self.normalized_name,
            'category': self.category.directory_name if self.category else '',
            'status': self.status,
            'destination': str(self.destination) if self.destination else '',
            'error_message': self.error_message
        }
