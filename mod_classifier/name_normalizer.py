"""
Mod 파일명 정규화 모듈

Mod 파일명에서 버전 번호, 로더 태그, 릴리스 단계 표시, 번역 제목 등을 제거하여
카탈로그 조회에 사용하는 정규화 키(canonical key)를 만듭니다.

정규화는 순서가 있는 규칙 목록으로 구성되며, 각 규칙은 독립적인 str -> str 변환입니다.
확장자는 처음에 분리되어 변경 없이 마지막에 다시 붙습니다.

예:
    examplemod-1.20.1-forge-[示例模组].jar  ->  examplemod.jar
    jei-11.6.0.1016.jar                     ->  jei.jar
"""
import re
from dataclasses import dataclass, field
from typing import Callable, List, Tuple


# 로더 이름 (닫힌 집합)
LOADER_NAMES: Tuple[str, ...] = (
    'forge', 'fabric', 'quilt', 'neoforge', 'rift', 'liteloader', 'nilloader',
)

# 릴리스 단계 표시
RELEASE_STAGES: Tuple[str, ...] = ('snapshot', 'pre', 'rc', 'beta', 'alpha')

# 공통 태그
COMMON_TAGS: Tuple[str, ...] = ('universal', 'all')

# 일부 명명 규칙에서 장식용 구분자로 쓰이는 문자
SEPARATOR_GLYPHS: Tuple[str, ...] = (
    '\u00b7',  # · (가운뎃점)
    '\u30fb',  # ・ (가타카나 가운뎃점)
    '\u2022',  # • (불릿)
    '\u2027',  # ‧ (하이픈 점)
)

# 접미사 반복 제거 최대 횟수
MAX_SUFFIX_PASSES = 64

# 규칙 목록 전체 반복 최대 횟수
MAX_PIPELINE_PASSES = 8

_LOADER_ALTERNATION = '|'.join(LOADER_NAMES)

BRACKET_PATTERN = re.compile(r'\[[^\]]*\]')
SEPARATOR_GLYPH_PATTERN = re.compile('[' + ''.join(SEPARATOR_GLYPHS) + ']')
ASCII_LETTER_PATTERN = re.compile(r'[A-Za-z]')
GAME_VERSION_PREFIX_PATTERN = re.compile(r'^[0-9]+\.[0-9]+(?:\.[0-9]+)*[-_]', re.IGNORECASE)
FOR_LOADER_PATTERN = re.compile(r'\s+for\s+[A-Za-z]+', re.IGNORECASE)
LOADER_DIGIT_PATTERN = re.compile(r'(' + _LOADER_ALTERNATION + r')(?=[0-9])', re.IGNORECASE)

# 버전 토큰: v?숫자 뒤에 [._-]로 시작하는 영숫자 수식어가 이어짐 (예: 1.20.1, v2.0-beta, 0.5.3+build.7)
# 수식어 부분은 "[._-]C(\.?C)*" 형태로, 점은 연속되거나 끝에 올 수 없음
_VERSION_TOKEN = r'v?[0-9]+(?:[._\-][0-9a-zA-Z_+\-](?:\.?[0-9a-zA-Z_+\-])*)?'
_MC_VERSION_TOKEN = r'mc[0-9]+(?:\.[0-9]+)*'

TRAILING_TOKEN_PATTERN = re.compile(
    r'[-_+\s.]'
    r'(?:'
    + _VERSION_TOKEN
    + r'|' + _MC_VERSION_TOKEN
    + r'|' + _LOADER_ALTERNATION
    + r'|' + '|'.join(RELEASE_STAGES)
    + r'|' + '|'.join(COMMON_TAGS)
    + r')$',
    re.IGNORECASE,
)

MULTI_SPACE_PATTERN = re.compile(r' +')
TRIM_CHARS = ' -_'


def split_extension(full_file_name: str) -> Tuple[str, str]:
    """
    마지막 '.' 기준으로 파일명과 확장자 분리

    Args:
        full_file_name: 확장자를 포함한 파일명

    Returns:
        (stem, extension) - extension은 '.'을 포함하며, 점이 없으면 빈 문자열
    """
    dot_pos = full_file_name.rfind('.')
    if dot_pos == -1:
        return full_file_name, ''
    return full_file_name[:dot_pos], full_file_name[dot_pos:]


def strip_brackets(stem: str) -> str:
    """[번역 제목] 같은 대괄호 구간 제거"""
    return BRACKET_PATTERN.sub('', stem)


def strip_separator_glyphs(stem: str) -> str:
    """장식용 구분 문자(가운뎃점 등) 제거"""
    return SEPARATOR_GLYPH_PATTERN.sub('', stem)


def resolve_mixed_script_prefix(stem: str) -> str:
    """
    비 ASCII 제목이 영문 이름 앞에 붙어 있는 경우 영문 부분만 남김

    마지막 비 ASCII 문자 뒤에 ASCII 영문자가 하나라도 있으면
    그 뒤쪽 문자열이 전체를 대체합니다. (예: "示例模组examplemod-1.0" -> "examplemod-1.0")
    """
    last_non_ascii = -1
    for index in range(len(stem) - 1, -1, -1):
        if ord(stem[index]) > 0x7F:
            last_non_ascii = index
            break

    if last_non_ascii == -1 or last_non_ascii == len(stem) - 1:
        return stem

    suffix = stem[last_non_ascii + 1:]
    if ASCII_LETTER_PATTERN.search(suffix):
        return suffix
    return stem


def strip_game_version_prefix(stem: str) -> str:
    """파일명 앞의 게임 버전 접두사 제거 (예: "1.12.2-examplemod" -> "examplemod")"""
    return GAME_VERSION_PREFIX_PATTERN.sub('', stem, count=1)


def strip_for_loader_clause(stem: str) -> str:
    """'for Forge' 같은 구문 제거"""
    return FOR_LOADER_PATTERN.sub('', stem)


def separate_loader_digits(stem: str) -> str:
    """로더 이름과 바로 붙은 숫자 사이에 공백 삽입 (예: "forge1.20.1" -> "forge 1.20.1")"""
    return LOADER_DIGIT_PATTERN.sub(r'\1 ', stem)


def strip_trailing_tokens(stem: str, max_passes: int = MAX_SUFFIX_PASSES) -> str:
    """
    끝에 붙은 버전/로더/릴리스 단계 토큰을 더 이상 변화가 없을 때까지 반복 제거

    Args:
        stem: 대상 문자열
        max_passes: 최대 반복 횟수

    Returns:
        접미사가 제거된 문자열
    """
    current = stem
    for _ in range(max_passes):
        # 끝의 구분자가 토큰을 가리지 않도록 매 반복마다 먼저 제거
        current = current.rstrip(TRIM_CHARS)
        stripped = TRAILING_TOKEN_PATTERN.sub('', current, count=1)
        if stripped == current:
            break
        current = stripped
    return current


def collapse_spaces(stem: str) -> str:
    """연속된 공백을 하나로 압축"""
    return MULTI_SPACE_PATTERN.sub(' ', stem)


def trim_separators(stem: str) -> str:
    """앞뒤 공백, 하이픈, 밑줄 제거"""
    return stem.strip(TRIM_CHARS)


def to_lowercase(stem: str) -> str:
    """소문자 변환"""
    return stem.lower()


@dataclass(frozen=True)
class NormalizationRule:
    """정규화 규칙 (이름 + 변환 함수)"""
    name: str
    transform: Callable[[str], str]

    def apply(self, stem: str) -> str:
        return self.transform(stem)


@dataclass
class NormalizationTrace:
    """정규화 과정 기록 (디버그/진단용)"""
    original: str
    stem: str = ""
    extension: str = ""
    steps: List[Tuple[str, str]] = field(default_factory=list)  # (규칙 이름, 적용 후 문자열)

    @property
    def result(self) -> str:
        """최종 정규화 키"""
        return self.stem + self.extension

    def format(self) -> str:
        """사람이 읽을 수 있는 형태로 변환"""
        initial_stem = split_extension(self.original)[0]
        lines = [f"원본: {self.original}"]
        lines.append(f"  split_extension: '{initial_stem}' + '{self.extension}'")
        for rule_name, value in self.steps:
            lines.append(f"  {rule_name}: '{value}'")
        lines.append(f"결과: {self.result}")
        return "\n".join(lines)


class NameNormalizer:
    """파일명 -> 정규화 키 변환기"""

    # 적용 순서가 중요함: 각 규칙은 이전 규칙의 결과에 적용됨
    RULES: Tuple[NormalizationRule, ...] = (
        NormalizationRule('strip_brackets', strip_brackets),
        NormalizationRule('strip_separator_glyphs', strip_separator_glyphs),
        NormalizationRule('resolve_mixed_script_prefix', resolve_mixed_script_prefix),
        NormalizationRule('strip_game_version_prefix', strip_game_version_prefix),
        NormalizationRule('strip_for_loader_clause', strip_for_loader_clause),
        NormalizationRule('separate_loader_digits', separate_loader_digits),
        NormalizationRule('strip_trailing_tokens', strip_trailing_tokens),
        NormalizationRule('collapse_spaces', collapse_spaces),
        NormalizationRule('trim_separators', trim_separators),
        NormalizationRule('to_lowercase', to_lowercase),
    )

    def __init__(self, rules: Tuple[NormalizationRule, ...] = None):
        self.rules = tuple(rules) if rules is not None else self.RULES

    def normalize(self, full_file_name: str) -> str:
        """
        파일명을 정규화 키로 변환

        Args:
            full_file_name: 확장자를 포함한 원본 파일명

        Returns:
            소문자 정규화 키 + 원본 확장자 (모든 토큰이 제거되면 확장자만 남음)
        """
        return self.normalize_with_trace(full_file_name).result

    def normalize_with_trace(self, full_file_name: str) -> NormalizationTrace:
        """
        정규화하면서 값이 바뀐 단계를 기록

        Args:
            full_file_name: 확장자를 포함한 원본 파일명

        Returns:
            NormalizationTrace
        """
        stem, extension = split_extension(full_file_name)
        trace = NormalizationTrace(original=full_file_name, extension=extension)
        # 뒤쪽 규칙이 앞쪽 규칙의 대상을 드러낼 수 있으므로 (예: "_1.12.2-mod"의 앞 구분자 제거 후
        # 게임 버전 접두사) 값이 더 이상 바뀌지 않을 때까지 규칙 목록 전체를 반복
        for _ in range(MAX_PIPELINE_PASSES):
            before = stem
            for rule in self.rules:
                updated = rule.apply(stem)
                if updated != stem:
                    trace.steps.append((rule.name, updated))
                stem = updated
            if stem == before:
                break
        trace.stem = stem
        return trace


_default_normalizer = NameNormalizer()


def normalize(full_file_name: str) -> str:
    """기본 규칙 목록으로 파일명 정규화"""
    return _default_normalizer.normalize(full_file_name)


def normalize_with_trace(full_file_name: str) -> NormalizationTrace:
    """기본 규칙 목록으로 정규화 과정 기록"""
    return _default_normalizer.normalize_with_trace(full_file_name)
