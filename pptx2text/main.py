"""
pptx2text - メイン実行ファイル
"""
import sys
import argparse
from typing import List, Optional

from tqdm import tqdm

from .text_processor.models import ExtractionMode, OutputFormat
from .text_processor.text_processor import TextProcessor
from .utils.config import config
from .utils.logger import get_logger, log_manager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptx2text",
        description="PPTXファイルからスライドのタイトルと本文テキストを抽出してYAMLで出力"
    )
    parser.add_argument("pptx_paths", nargs="+", metavar="PPTX_PATH",
                        help="PPTXファイル、ディレクトリ、またはワイルドカードパターン")
    parser.add_argument("-f", "--output-format", choices=[f.value for f in OutputFormat],
                        help="出力形式（既定: 設定ファイルの output.format）")
    parser.add_argument("--slides-count", action="store_true", help="スライド数のみ出力")
    parser.add_argument("--slide-titles", action="store_true", help="スライドタイトルの一覧のみ出力")
    parser.add_argument("-o", "--output", help="出力先ファイル（省略時は標準出力）")
    parser.add_argument("-c", "--config", help="設定ファイルのパス")
    parser.add_argument("-v", "--verbose", action="store_true", help="処理状況を表示")
    parser.add_argument("--debug", action="store_true", help="デバッグログを表示")
    return parser


def select_mode(args: argparse.Namespace) -> ExtractionMode:
    """スライド数 → タイトル一覧の順にフラグを確認"""
    if args.slides_count:
        return ExtractionMode.SLIDES_COUNT
    if args.slide_titles:
        return ExtractionMode.SLIDE_TITLES
    return ExtractionMode.CONTENT


def main(argv: Optional[List[str]] = None) -> int:
    """メイン関数"""
    args = build_parser().parse_args(argv)

    if args.config:
        try:
            config.reload(args.config)
        except (FileNotFoundError, ValueError) as e:
            get_logger("main").error(f"設定エラー: {e}")
            return 1

    # ロガーの初期化
    log_manager.configure(verbose=args.verbose, debug=args.debug)
    logger = get_logger("main")

    mode = select_mode(args)
    processor = TextProcessor()
    pptx_paths = processor.file_handler.expand_inputs(args.pptx_paths)

    records = []
    failed = 0
    try:
        for pptx_path in tqdm(pptx_paths, desc="pptx2text", unit="file",
                              disable=len(pptx_paths) < 2):
            result = processor.process_presentation(pptx_path, mode, args.output_format)
            records.extend(result.records)
            if not result.ok:
                failed += 1
    except KeyboardInterrupt:
        logger.info("ユーザーによって処理が中断されました")
        return 1

    output = "".join(records)
    if args.output:
        processor.file_handler.write_text(output, args.output)
    else:
        sys.stdout.write(output)

    if failed:
        logger.warning(f"{failed}件のファイルでエラーが発生しました")
        return 1
    logger.info("処理が正常に完了しました")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
