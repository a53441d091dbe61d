"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy 엔진, 세션, Base 클래스를 정의합니다.
"""

from sqlalchemy import create_engine, Numeric
from sqlalchemy.orm import sessionmaker, declarative_base

from posdash.core.config import Settings, get_settings


def build_engine(settings: Settings):
    """
    설정에 맞는 SQLAlchemy 엔진을 생성합니다.

    MySQL(pymysql)은 connection pool 옵션을 사용하고,
    SQLite는 check_same_thread만 비활성화합니다.
    """
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # connection 유효성 자동 체크
        pool_recycle=settings.db_pool_recycle,  # MySQL wait_timeout 이전에 재생성
    )


engine = build_engine(get_settings())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# 금액 컬럼: DB에는 DECIMAL(10,2), 파이썬에서는 float
Money = Numeric(10, 2, asdecimal=False)


def get_db():
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    사용 예:
        @router.get("/categories")
        def list_categories(db: Session = Depends(get_db)):
            return db.query(Category).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
