"""
Pytest Configuration

프로젝트 루트를 sys.path에 추가하고, 테스트 공용 fixture를 제공합니다.
"""
import sys
import os
import json
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from mod_classifier.classifier_logger import ClassifierLogger


@pytest.fixture
def workspace(tmp_path):
    """Input/Output 폴더를 가진 임시 작업 공간"""
    (tmp_path / "Input").mkdir()
    return tmp_path


@pytest.fixture
def file_logger(tmp_path):
    """콘솔 출력 없이 임시 폴더에 로그 파일을 쓰는 로거"""
    logger = ClassifierLogger(log_level="DEBUG", log_dir=tmp_path / "logs", console_output=False)
    yield logger
    logger.close()


@pytest.fixture
def write_catalog(tmp_path):
    """카탈로그 JSON 파일 작성 헬퍼"""
    def _write(records, name="mods_data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records, ensure_ascii=False), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def make_mod_file():
    """가상 Mod 파일 생성 헬퍼"""
    def _make(folder: Path, name: str, content: str = "jar-bytes") -> Path:
        path = folder / name
        path.write_text(content, encoding='utf-8')
        return path
    return _make
