"""ModCategory 토큰/폴더 매핑 테스트"""
import pytest

from mod_classifier.mod_category import ModCategory


@pytest.mark.parametrize("token, category", [
    ("client_only", ModCategory.ClientOnly),
    ("server_only", ModCategory.ServerOnly),
    ("client_required_server_optional", ModCategory.ClientRequiredServerOptional),
    ("client_optional_server_required", ModCategory.ClientOptionalServerRequired),
    ("client_and_server_required", ModCategory.ClientAndServerRequired),
    ("client_optional_server_optional", ModCategory.ClientOptionalServerOptional),
    ("unknown", ModCategory.Unknown),
])
def test_from_token(token, category):
    assert ModCategory.from_token(token) is category
    assert category.token == token


def test_unrecognized_token_falls_back_to_unknown():
    assert ModCategory.from_token("both_sides") is ModCategory.Unknown
    assert ModCategory.from_token("CLIENT_ONLY") is ModCategory.Unknown
    assert ModCategory.from_token(None) is ModCategory.Unknown
    assert not ModCategory.is_known_token("both_sides")


def test_directory_names_match_identifiers():
    assert [category.directory_name for category in ModCategory] == [
        "ClientOnly",
        "ServerOnly",
        "ClientRequiredServerOptional",
        "ClientOptionalServerRequired",
        "ClientAndServerRequired",
        "ClientOptionalServerOptional",
        "Unknown",
    ]
    assert ModCategory.ClientOnly.directory_name == "ClientOnly"
