"""ModFile 데이터 모델 테스트"""
from pathlib import Path

from mod_classifier.mod_category import ModCategory
from mod_classifier.mod_file import ModFile, STATUS_COPIED, STATUS_PENDING


def test_from_path():
    mod_file = ModFile.from_path(Path("Input") / "jei-11.6.0.1016.jar")

    assert mod_file.file_name == "jei-11.6.0.1016.jar"
    assert mod_file.status == STATUS_PENDING
    assert mod_file.category is None


def test_report_row():
    mod_file = ModFile(
        source_path=Path("Input/jei-11.6.0.1016.jar"),
        file_name="jei-11.6.0.1016.jar",
        normalized_name="jei.jar",
        category=ModCategory.ClientOptionalServerOptional,
        status=STATUS_COPIED,
        destination=Path("Output/ClientOptionalServerOptional/jei-11.6.0.1016.jar"),
    )

    row = mod_file.to_dict()

    assert row['category'] == "ClientOptionalServerOptional"
    assert row['destination'] == str(Path("Output/ClientOptionalServerOptional/jei-11.6.0.1016.jar"))
    assert row['error_message'] == ""


def test_report_row_for_unmatched_file():
    row = ModFile.from_path(Path("Input/unknownmod-1.0.jar")).to_dict()

    assert row['category'] == ""
    assert row['destination'] == ""
