"""
NameNormalizer 테스트

규칙 단위 테스트와 전체 파이프라인 예제/성질(멱등성, 확장자 보존, 대소문자 무관) 검증
"""
import pytest

from mod_classifier.name_normalizer import (
    NameNormalizer,
    NormalizationRule,
    normalize,
    normalize_with_trace,
    split_extension,
    strip_brackets,
    strip_separator_glyphs,
    resolve_mixed_script_prefix,
    strip_game_version_prefix,
    strip_for_loader_clause,
    separate_loader_digits,
    strip_trailing_tokens,
    collapse_spaces,
    trim_separators,
    to_lowercase,
)


REALISTIC_NAMES = [
    "examplemod-1.20.1-forge-[示例模组].jar",
    "jei-11.6.0.1016.jar",
    "unknownmod-1.0.jar",
    "1.12.2-examplemod.jar",
    "[中文]Waystones for Forge 1.20.1.jar",
    "示例模组examplemod-forge1.20.1.jar",
    "Sodium-Fabric-MC1.20.1-0.5.3.jar",
    "Mod·Name-1.0.jar",
    "journeymap-1.20.1-5.9.18-neoforge.jar",
    "[示例模组].jar",
]

# 트리밍 단계가 새 토큰이나 접두사를 드러낼 수 있는 이름
SEPARATOR_EDGE_NAMES = [
    "mod-beta_.jar",
    "examplemod-forge .jar",
    "_1.12.2-Mod Name.jar",
    "Mod-alpha -_.jar",
]


class TestRules:
    """개별 규칙 테스트"""

    @pytest.mark.parametrize("name, expected", [
        ("examplemod-1.0.jar", ("examplemod-1.0", ".jar")),
        ("noext", ("noext", "")),
        (".jar", ("", ".jar")),
        ("a.b.c", ("a.b", ".c")),
    ])
    def test_split_extension(self, name, expected):
        assert split_extension(name) == expected

    def test_strip_brackets(self):
        assert strip_brackets("mod-1.0[中文名]") == "mod-1.0"
        assert strip_brackets("[앞]mod[뒤]") == "mod"
        assert strip_brackets("mod") == "mod"

    def test_strip_separator_glyphs(self):
        assert strip_separator_glyphs("Mod·Name") == "ModName"
        assert strip_separator_glyphs("Mod・Name•X") == "ModNameX"

    def test_resolve_mixed_script_prefix(self):
        """비 ASCII 제목 뒤에 붙은 영문 이름만 남김"""
        assert resolve_mixed_script_prefix("示例模组examplemod-1.0") == "examplemod-1.0"

    def test_resolve_mixed_script_prefix_keeps_stem(self):
        # 마지막 문자가 비 ASCII
        assert resolve_mixed_script_prefix("mod 中文") == "mod 中文"
        # 뒤쪽에 영문자가 없음
        assert resolve_mixed_script_prefix("中文 1.0") == "中文 1.0"
        # 비 ASCII 문자가 없음
        assert resolve_mixed_script_prefix("examplemod") == "examplemod"
        assert resolve_mixed_script_prefix("") == ""

    def test_strip_game_version_prefix(self):
        assert strip_game_version_prefix("1.12.2-examplemod") == "examplemod"
        assert strip_game_version_prefix("1.20_mod") == "mod"
        assert strip_game_version_prefix("mod-1.12.2") == "mod-1.12.2"
        assert strip_game_version_prefix("1-mod") == "1-mod"

    def test_strip_for_loader_clause(self):
        assert strip_for_loader_clause("Waystones for Forge") == "Waystones"
        assert strip_for_loader_clause("Mod FOR fabric 1.0") == "Mod 1.0"
        assert strip_for_loader_clause("forestry") == "forestry"

    def test_separate_loader_digits(self):
        assert separate_loader_digits("mod-forge1.20.1") == "mod-forge 1.20.1"
        assert separate_loader_digits("NeoForge21") == "NeoForge 21"
        assert separate_loader_digits("mod-forge-1.0") == "mod-forge-1.0"

    @pytest.mark.parametrize("stem, expected", [
        ("jei-11.6.0.1016", "jei"),
        ("mod-1.20.1-forge-universal", "mod"),
        ("sodium-fabric-mc1.20.1-0.5.3", "sodium"),
        ("mod beta", "mod"),
        ("mod-v2.0", "mod"),
        ("Mod_ALPHA", "Mod"),
        ("mod+1.0", "mod"),
        ("betterend", "betterend"),
        ("modall", "modall"),
    ])
    def test_strip_trailing_tokens(self, stem, expected):
        assert strip_trailing_tokens(stem) == expected

    def test_strip_trailing_tokens_ignores_trailing_separators(self):
        """끝의 구분자 뒤에 숨은 토큰도 제거"""
        assert strip_trailing_tokens("mod-beta_") == "mod"
        assert strip_trailing_tokens("examplemod-forge ") == "examplemod"

    def test_strip_trailing_tokens_respects_pass_cap(self):
        """반복 횟수 제한"""
        assert strip_trailing_tokens("mod-alpha-beta-rc", max_passes=1) == "mod-alpha-beta"
        assert strip_trailing_tokens("mod-alpha-beta-rc") == "mod"

    def test_whitespace_and_case_rules(self):
        assert collapse_spaces("a   b  c") == "a b c"
        assert trim_separators(" -_mod_- ") == "mod"
        assert to_lowercase("MoD") == "mod"


class TestNormalize:
    """전체 정규화 파이프라인 테스트"""

    @pytest.mark.parametrize("name, expected", [
        ("examplemod-1.20.1-forge-[示例模组].jar", "examplemod.jar"),
        ("jei-11.6.0.1016.jar", "jei.jar"),
        ("unknownmod-1.0.jar", "unknownmod.jar"),
        ("1.12.2-examplemod.jar", "examplemod.jar"),
        ("[中文]Waystones for Forge 1.20.1.jar", "waystones.jar"),
        ("示例模组examplemod-forge1.20.1.jar", "examplemod.jar"),
        ("Sodium-Fabric-MC1.20.1-0.5.3.jar", "sodium.jar"),
        ("journeymap-1.20.1-5.9.18-neoforge.jar", "journeymap.jar"),
        ("examplemod-1.0", "examplemod.0"),
        ("examplemod", "examplemod"),
    ])
    def test_examples(self, name, expected):
        assert normalize(name) == expected

    def test_separator_glyph_removed_before_mixed_script_rule(self):
        """가운뎃점이 먼저 제거되어 이름 앞부분이 잘리지 않음"""
        assert normalize("Mod·Name-1.0.jar") == "modname.jar"

    def test_fully_stripped_name_leaves_extension(self):
        assert normalize("[示例模组].jar") == ".jar"
        assert normalize("-v1.2.3-beta.jar") == ".jar"

    def test_extension_is_preserved_verbatim(self):
        assert normalize("Mod-1.0.JAR") == "mod.JAR"
        for name in REALISTIC_NAMES:
            assert normalize(name).endswith(split_extension(name)[1])

    def test_idempotent(self):
        for name in REALISTIC_NAMES + SEPARATOR_EDGE_NAMES:
            once = normalize(name)
            assert normalize(once) == once, name

    @pytest.mark.parametrize("stem", [
        "jei-11.6.0.1016",
        "examplemod-1.20.1-forge",
        "Waystones for Forge 1.20.1",
        "Sodium-Fabric-mc1.20.1-0.5.3",
    ])
    def test_case_invariant(self, stem):
        assert normalize(stem + ".jar") == normalize(stem.upper() + ".jar")

    def test_separator_edge_cases(self):
        assert normalize("mod-beta_.jar") == "mod.jar"
        assert normalize("examplemod-forge .jar") == "examplemod.jar"
        assert normalize("_1.12.2-Mod Name.jar") == "mod name.jar"

    def test_brackets_removed(self):
        result = normalize("mod-1.0[中文名].jar")
        assert "[" not in result and "]" not in result

    def test_adversarial_input_terminates(self):
        name = "a" + "-1" * 500 + "!.jar"
        assert normalize(name).endswith(".jar")


class TestNameNormalizer:
    """NameNormalizer 규칙 테이블 테스트"""

    def test_rule_order(self):
        assert [rule.name for rule in NameNormalizer.RULES] == [
            'strip_brackets',
            'strip_separator_glyphs',
            'resolve_mixed_script_prefix',
            'strip_game_version_prefix',
            'strip_for_loader_clause',
            'separate_loader_digits',
            'strip_trailing_tokens',
            'collapse_spaces',
            'trim_separators',
            'to_lowercase',
        ]

    def test_custom_rule_table(self):
        normalizer = NameNormalizer(rules=(NormalizationRule('to_lowercase', to_lowercase),))
        assert normalizer.normalize("ABC-1.0.Jar") == "abc-1.0.Jar"

    def test_trace_records_changed_steps(self):
        trace = normalize_with_trace("jei-11.6.0.1016.jar")
        assert trace.result == "jei.jar"
        assert trace.extension == ".jar"
        assert trace.steps == [('strip_trailing_tokens', 'jei')]
        assert "결과: jei.jar" in trace.format()

    def test_trace_matches_normalize(self):
        for name in REALISTIC_NAMES:
            assert normalize_with_trace(name).result == normalize(name)
