"""
Mod Classifier 버전 정보

버전 관리 규칙: Semantic Versioning (https://semver.org/lang/ko/)
- MAJOR: 호환되지 않는 카탈로그/CLI 변경
- MINOR: 하위 호환성 있는 기능 추가 (정규화 규칙 추가 등)
- PATCH: 하위 호환성 있는 버그 수정
"""

__version__ = "1.2.0"
__release_date__ = "2026-10-18"
__app_name__ = "Minecraft Mod Classifier"


def get_full_version() -> str:
    """--version 출력 및 시작 로그용 전체 버전 문자열"""
    return f"{__app_name__} v{__version__} ({__release_date__})"
