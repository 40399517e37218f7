"""
Five-Card Poker Showdown - Main Entry Point
"""

import sys
import argparse
import logging
import os
from datetime import datetime

from five_card_poker.cli_ui import ShowdownUI
from five_card_poker.config import Settings, load_settings, parse_log_level
from five_card_poker.exceptions import PokerError

LOGGER_NAME = "five_card_poker"


def setup_logging(settings: Settings):
    """ログ設定をセットアップ"""
    poker_logger = logging.getLogger(LOGGER_NAME)
    poker_logger.setLevel(logging.DEBUG)

    # 既存のハンドラーをクリア（重複を避けるため）
    poker_logger.handlers.clear()

    # フォーマッターを設定
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if settings.log_to_file:
        # ログディレクトリの作成
        if not os.path.exists(settings.log_dir):
            os.makedirs(settings.log_dir)

        # タイムスタンプ付きのログファイル名を生成
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = os.path.join(settings.log_dir, f"showdown_{timestamp}.log")

        file_handler = logging.FileHandler(log_filename, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        poker_logger.addHandler(file_handler)

    # コンソールハンドラー（結果表示と混ざらないよう stderr へ）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(settings.level)
    console_handler.setFormatter(formatter)
    poker_logger.addHandler(console_handler)

    return poker_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="5枚ポーカーのハンド判定（役の分類と勝者の決定）"
    )
    parser.add_argument(
        "hands",
        nargs="*",
        help='ハンド（5枚）を1引数ずつ指定（例: "AH KH QH JH 10H"）',
    )
    parser.add_argument(
        "--demo", action="store_true", help="サンプル配札で実行"
    )
    parser.add_argument(
        "--json", action="store_true", help="結果をJSONで出力"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="ログレベル（デフォルト: 環境変数 FIVE_CARD_POKER_LOG_LEVEL または INFO）",
    )
    return parser


def main(argv=None) -> int:
    """メイン関数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.log_level:
            parse_log_level(args.log_level)
            settings = Settings(
                log_level=args.log_level.upper(),
                log_dir=settings.log_dir,
                log_to_file=settings.log_to_file,
            )
    except ValueError as e:
        print(f"設定エラー: {e}", file=sys.stderr)
        return 1

    logger = setup_logging(settings)

    try:
        ui = ShowdownUI(as_json=args.json)
        if args.demo:
            ui.run_demo()
        else:
            ui.run_deal(args.hands)
        return 0

    except PokerError as e:
        logger.debug("Rejected input: %s", e)
        print(f"入力エラー: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\n終了します。")
        return 0
    except Exception as e:
        print(f"\nエラーが発生しました: {e}", file=sys.stderr)
        print("詳細なエラー情報:", file=sys.stderr)
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
