#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Path Utilities for PyInstaller

PyInstaller로 패키징된 실행 파일과 일반 Python 실행 모두에서
로그/카탈로그/입출력 폴더의 기준 경로를 일관되게 찾는 유틸리티입니다.
"""
import sys
from pathlib import Path
from typing import Union


def is_frozen() -> bool:
    """
    PyInstaller로 패키징된 상태인지 확인
    
    Returns:
        bool: 패키징된 상태면 True
    """
    return bool(getattr(sys, 'frozen', False))


def get_app_dir() -> Path:
    """
    애플리케이션 기준 폴더 반환
    
    실행 파일로 배포된 경우 실행 파일이 있는 폴더를,
    일반 실행 시 현재 작업 디렉토리를 반환합니다.
    로그 폴더를 지정하지 않으면 로그 파일은 이 폴더에 생성됩니다.
    
    Returns:
        Path: 기준 폴더
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path.cwd()


def resolve_path(path: Union[str, Path], base_dir: Union[str, Path, None] = None) -> Path:
    """
    상대 경로를 기준 폴더 기준의 경로로 변환
    
    Args:
        path: 변환할 경로 (절대 경로면 그대로 반환)
        base_dir: 기준 폴더 (None이면 현재 작업 디렉토리)
        
    Returns:
        Path: 변환된 경로
    """
    path = Path(path)
    if path.is_absolute():
        return path
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return base / path

