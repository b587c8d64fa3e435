"""
Mod 분류 카테고리

카탈로그의 type 토큰과 출력 하위 폴더 이름을 한곳에서 관리합니다.
카테고리는 닫힌 집합이며, 각 카테고리는 같은 이름의 출력 폴더 하나에 대응합니다.
"""
from enum import Enum
from typing import Dict


class ModCategory(Enum):
    """Mod 설치 위치 분류 (값 = 카탈로그 type 토큰)"""
    
    ClientOnly = "client_only"
    ServerOnly = "server_only"
    ClientRequiredServerOptional = "client_required_server_optional"
    ClientOptionalServerRequired = "client_optional_server_required"
    ClientAndServerRequired = "client_and_server_required"
    ClientOptionalServerOptional = "client_optional_server_optional"
    Unknown = "unknown"  # 수동 검토용 (매칭 실패와는 다름)
    
    @property
    def directory_name(self) -> str:
        """출력 하위 폴더 이름 (카테고리 식별자와 동일)"""
        return self.name
    
    @property
    def token(self) -> str:
        """카탈로그 JSON에서 사용하는 type 토큰"""
        return self.value
    
    @classmethod
    def from_token(cls, token: str) -> 'ModCategory':
        """
        카탈로그 type 토큰을 카테고리로 변환
        
        Args:
            token: type 필드 값 (예: "client_only")
            
        Returns:
            대응하는 ModCategory (알 수 없는 토큰이면 Unknown)
        """
        if not isinstance(token, str):
            return cls.Unknown
        return _TOKEN_MAP.get(token, cls.Unknown)
    
    @classmethod
    def is_known_token(cls, token: str) -> bool:
        """토큰이 정의된 카테고리 토큰인지 확인"""
        return isinstance(token, str) and token in _TOKEN_MAP


_TOKEN_MAP: Dict[str, ModCategory] = {category.value: category for category in ModCategory}
