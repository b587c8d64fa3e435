"""분류기 예외 정의"""


class ModClassifierError(RuntimeError):
    """분류기 공통 예외"""


class OutputSetupError(ModClassifierError):
    """출력 폴더 구조를 만들 수 없을 때 (실행 중단)"""


class InputFolderError(ModClassifierError):
    """입력 폴더를 만들 수 없거나 폴더가 아닐 때 (실행 중단)"""


class CatalogFileError(ModClassifierError):
    """카탈로그 파일을 만들 수 없거나 파일이 아닐 때 (실행 중단)"""
