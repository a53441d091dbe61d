"""
로깅 설정

애플리케이션 시작 시 한 번 호출하여 루트 로거 포맷과 레벨을 지정합니다.
각 모듈은 logging.getLogger(__name__)으로 로거를 가져옵니다.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, WARNING ...)
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # SQL 로그는 DEBUG 레벨에서만 출력
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
