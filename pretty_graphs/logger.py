"""コマンドライン用のロガー設定"""
import logging
import sys


def setup_logger(name="pretty_graphs", level="INFO"):
    """コンソール出力のロガーを設定する（二重登録しない）"""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    return logger
