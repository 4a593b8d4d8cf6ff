"""
로깅 설정 모듈
config의 logging 섹션으로 콘솔 / 회전 파일 핸들러를 구성한다.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config_loader import Config, get_config

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: Optional[str], default: int) -> int:
    """'DEBUG' 같은 레벨 이름을 logging 상수로 변환 (모르는 이름이면 default)"""
    if not name:
        return default
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else default


def _file_handler(config: Config, formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(config.get('logging.file.directory', 'logs'))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / config.get('logging.file.filename', 'hairstyle_recommender.log'),
        maxBytes=config.get('logging.file.max_bytes', 10 * 1024 * 1024),
        backupCount=config.get('logging.file.backup_count', 5),
        encoding='utf-8'
    )
    handler.setLevel(_level(config.get('logging.file.level'), logging.DEBUG))
    handler.setFormatter(formatter)
    return handler


def setup_logging(name: str = None, config: Optional[Config] = None) -> logging.Logger:
    """
    로거 생성 및 핸들러 설정

    logging 섹션이 없는 설정 파일(--config로 지정한 사용자 파일 등)도 허용하며,
    이 경우 콘솔 INFO 출력만 사용한다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        config: 사용할 Config (None이면 전역 설정)

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    logger = logging.getLogger(name or 'hairstyle_recommender')

    # 모듈마다 여러 번 호출되므로 핸들러 중복 추가 방지
    if logger.handlers:
        return logger

    if config is None:
        config = get_config()

    logger.setLevel(_level(config.get('logging.level'), logging.INFO))
    formatter = logging.Formatter(
        config.get('logging.format', DEFAULT_FORMAT),
        datefmt=config.get('logging.date_format', DEFAULT_DATE_FORMAT)
    )

    if config.get('logging.console.enabled', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(config.get('logging.console.level'), logging.INFO))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.get('logging.file.enabled', False):
        logger.addHandler(_file_handler(config, formatter))

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """setup_logging(name)의 간편 함수"""
    return setup_logging(name)
