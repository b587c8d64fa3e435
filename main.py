#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Minecraft Mod Classifier - CLI Entry Point

Input 폴더의 Mod 파일을 mods_data.json 카탈로그 기준으로 분류하여
Output/<카테고리> 폴더로 복사합니다.

사용법:
    python main.py [옵션]

예시:
    python main.py                              # Input -> Output, mods_data.json 사용
    python main.py -i ./mods -o ./sorted        # 폴더 지정
    python main.py --dry-run --no-pause         # 복사 없이 미리보기
    python main.py --explain "jei-11.6.0.1016.jar"  # 정규화 과정 출력
"""
import sys
import os

# 프로젝트 루트를 sys.path에 추가 (절대 import 지원)
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse
from pathlib import Path
from typing import List, Optional

from mod_classifier.catalog import Catalog, ensure_catalog_file
from mod_classifier.classifier import ModClassifier, ClassificationResult
from mod_classifier.classifier_logger import ClassifierLogger
from mod_classifier.errors import InputFolderError, CatalogFileError, OutputSetupError
from mod_classifier.name_normalizer import normalize_with_trace
from mod_classifier.path_utils import get_app_dir
from mod_classifier.version import __version__, get_full_version
from config.classifier_config import ClassifierConfig


def create_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    parser = argparse.ArgumentParser(
        prog='mod-classifier',
        description=f'Minecraft Mod Classifier v{__version__} - 카탈로그 기반 Mod 분류 도구',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  %(prog)s                                  # Input -> Output 분류
  %(prog)s -i ./mods -o ./sorted            # 폴더 지정
  %(prog)s --dry-run --no-pause             # 복사 없이 미리보기
  %(prog)s --explain "jei-11.6.0.1016.jar"  # 정규화 과정 출력
        """
    )

    parser.add_argument(
        '-i', '--input',
        type=str,
        default=None,
        help='분류할 Mod 파일이 있는 폴더 (기본값: Input)'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='분류 결과 폴더 (기본값: Output)'
    )

    parser.add_argument(
        '-c', '--catalog',
        type=str,
        default=None,
        help='카탈로그 파일 경로 (기본값: mods_data.json)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='설정 파일 경로 (JSON)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='콘솔 로그 레벨 (기본값: INFO)'
    )

    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='로그 파일 폴더 (기본값: 실행 파일 폴더)'
    )

    parser.add_argument(
        '--append-log',
        action='store_true',
        help='로그 파일을 새로 쓰지 않고 이어 쓰기'
    )

    parser.add_argument(
        '-d', '--dry-run',
        action='store_true',
        help='파일을 복사하지 않고 분류 결과만 출력'
    )

    parser.add_argument(
        '--report',
        action='store_true',
        help='출력 폴더에 분류 결과 CSV 생성'
    )

    parser.add_argument(
        '--no-pause',
        action='store_true',
        help='종료 전 키 입력 대기 생략'
    )

    parser.add_argument(
        '--explain',
        type=str,
        metavar='FILENAME',
        default=None,
        help='파일명의 정규화 과정을 출력하고 종료'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=get_full_version(),
        help='버전 정보 출력'
    )

    return parser


def build_config(args: argparse.Namespace) -> ClassifierConfig:
    """설정 파일 -> .env/환경변수 -> CLI 인자 순서로 설정 구성"""
    if args.config:
        config = ClassifierConfig.load(Path(args.config))
    else:
        config = ClassifierConfig()

    config.apply_env_overrides()

    if args.input:
        config.input_folder = args.input
    if args.output:
        config.output_folder = args.output
    if args.catalog:
        config.catalog_file = args.catalog
    if args.log_level:
        config.log_level = args.log_level
    if args.log_dir:
        config.log_dir = args.log_dir
    if args.append_log:
        config.log_append = True
    if args.dry_run:
        config.dry_run = True
    if args.report:
        config.write_report = True
    if args.no_pause:
        config.pause_on_exit = False

    return config


def create_logger(config: ClassifierConfig, app_dir: Path) -> ClassifierLogger:
    """로거 생성 (로그 파일을 열 수 없으면 콘솔 전용으로 계속)"""
    try:
        return ClassifierLogger(
            log_level=config.log_level,
            log_dir=config.log_path(app_dir),
            log_filename=config.log_filename,
            append=config.log_append
        )
    except OSError as e:
        print(f"오류: 로그 파일을 열 수 없습니다: {config.log_path(app_dir)} - {e}", file=sys.stderr)
        return ClassifierLogger(log_level=config.log_level, file_output=False)


def ensure_input_folder(input_dir: Path, logger: ClassifierLogger) -> Path:
    """
    입력 폴더 확인 (없으면 생성)

    Raises:
        InputFolderError: 생성 실패 또는 폴더가 아닌 경우
    """
    if not input_dir.exists():
        logger.info(f"'{input_dir.name}' 폴더가 없어 생성합니다...")
        try:
            input_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InputFolderError(f"'{input_dir}' 폴더를 생성할 수 없습니다: {e}") from e
    elif not input_dir.is_dir():
        raise InputFolderError(f"'{input_dir}' 경로가 존재하지만 폴더가 아닙니다.")
    return input_dir


def print_final_summary(result: ClassificationResult, dry_run: bool):
    """최종 결과 요약 출력"""
    mode = "미리보기" if dry_run else "분류"

    print("\n" + "=" * 60)
    print(f"Mod {mode} 완료")
    print("=" * 60)
    print(f"   총 파일 수:  {result.total_files}")
    if dry_run:
        print(f"   복사 예정:   {result.planned}")
    else:
        print(f"   복사:        {result.copied}")
    print(f"   건너뜀:      {result.skipped}")
    print(f"   매칭 실패:   {result.unmatched}")
    print(f"   복사 실패:   {result.failed}")

    if result.report_path:
        print(f"\n보고서: {result.report_path}")

    # 카탈로그에 추가해야 할 파일 (최대 10개)
    unmatched = result.unmatched_files
    if unmatched:
        print(f"\n카탈로그에 없는 파일 ({len(unmatched)}건):")
        for mod_file in unmatched[:10]:
            print(f"   - {mod_file.file_name} (정규화 이름: {mod_file.normalized_name})")
        if len(unmatched) > 10:
            print(f"   ... 외 {len(unmatched) - 10}건")

    if result.errors:
        print(f"\n오류 목록 ({len(result.errors)}건):")
        for i, error in enumerate(result.errors[:5]):
            print(f"   {i+1}. {error}")
        if len(result.errors) > 5:
            print(f"   ... 외 {len(result.errors) - 5}건")

    print("=" * 60)


def press_any_key(prompt: str = "아무 키나 누르면 종료합니다..."):
    """키 입력 대기 (Windows: msvcrt, POSIX 터미널: cbreak 모드, 그 외: input)"""
    print(prompt, flush=True)
    try:
        if os.name == 'nt':
            import msvcrt
            msvcrt.getch()
        elif sys.stdin is not None and sys.stdin.isatty():
            import termios
            import tty
            fd = sys.stdin.fileno()
            old_settings = termios.tcgetattr(fd)
            try:
                tty.setcbreak(fd)
                sys.stdin.read(1)
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        else:
            input()
    except (EOFError, KeyboardInterrupt):
        pass


def run_classifier(config: ClassifierConfig, logger: ClassifierLogger, base_dir: Path) -> int:
    """
    분류 실행

    Args:
        config: 분류기 설정
        logger: 로거
        base_dir: 상대 경로 기준 폴더

    Returns:
        종료 코드 (0: 완료, 1: 치명적 오류)
    """
    try:
        input_dir = ensure_input_folder(config.input_path(base_dir), logger)
        catalog_path = config.catalog_path(base_dir)
        ensure_catalog_file(catalog_path, logger)
    except (InputFolderError, CatalogFileError) as e:
        logger.error(str(e), exc_info=False)
        return 1

    logger.info("Mod 데이터를 읽는 중...")
    catalog = Catalog.load(catalog_path, logger)
    if len(catalog) == 0:
        logger.info(
            f"카탈로그에서 읽은 Mod 정보가 없습니다. "
            f"'{catalog_path.name}'에 올바른 항목이 있는지 확인하세요."
        )

    classifier = ModClassifier(config.output_path(base_dir), logger, dry_run=config.dry_run)

    logger.info("Mod 분류를 시작합니다...")
    try:
        result = classifier.run(input_dir, catalog, write_report=config.write_report)
    except OutputSetupError:
        return 1
    except OSError as e:
        logger.error(f"입력 폴더를 읽을 수 없습니다: {input_dir} - {e}", exc_info=False)
        return 1

    print_final_summary(result, config.dry_run)
    logger.info("Mod 분류 완료!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """메인 엔트리포인트"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.explain:
        print(normalize_with_trace(args.explain).format())
        return 0

    config = build_config(args)
    logger = create_logger(config, get_app_dir())
    logger.info(f"{get_full_version()} 시작")

    try:
        exit_code = run_classifier(config, logger, Path.cwd())
    except KeyboardInterrupt:
        logger.warning("사용자에 의해 중단되었습니다.")
        exit_code = 130
    finally:
        logger.close()

    if config.pause_on_exit:
        press_any_key()

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
