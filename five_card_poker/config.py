"""
Runtime settings loaded from the environment (and an optional .env file)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "FIVE_CARD_POKER_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """ログ関連の設定"""

    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False

    @property
    def level(self) -> int:
        return parse_log_level(self.log_level)


def parse_log_level(name: str) -> int:
    """'debug' などのレベル名を logging の数値に変換"""
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def load_settings(dotenv_path=None) -> Settings:
    """環境変数（.envを含む）から設定を読み込む"""
    # パス未指定時はカレントディレクトリから .env を探す
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    defaults = Settings()
    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level)
    log_dir = os.getenv(f"{ENV_PREFIX}LOG_DIR", defaults.log_dir)
    log_to_file_raw = os.getenv(f"{ENV_PREFIX}LOG_TO_FILE")
    if log_to_file_raw is None:
        log_to_file = defaults.log_to_file
    else:
        log_to_file = log_to_file_raw.strip().lower() in _TRUTHY

    # 不正なレベル名はここで検出する
    parse_log_level(log_level)

    return Settings(
        log_level=log_level.strip().upper(), log_dir=log_dir, log_to_file=log_to_file
    )
