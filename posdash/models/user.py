"""
User 모델

대시보드 로그인 계정 정보를 저장하는 SQLAlchemy 모델입니다.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON
from posdash.db.database import Base


class User(Base):
    """
    사용자 모델

    Attributes:
        id: 사용자 고유 ID (Primary Key)
        email: 로그인 이메일 (Unique, 소문자로 정규화되어 저장)
        password: bcrypt 해시 비밀번호 (Not Null)
        name: 표시 이름 (Nullable)
        role: 권한 (기본값 user)
        status: 계정 상태 (기본값 active)
        modules: 접근 가능한 대시보드 모듈 키 목록 (JSON, Nullable)
        created_at: 생성 일시 (자동 설정)
        updated_at: 수정 일시 (자동 업데이트)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    email = Column(String(191), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=True)
    role = Column(String(50), nullable=False, default="user")
    status = Column(String(50), nullable=False, default="active")
    modules = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    @property
    def module_list(self) -> list[str]:
        """modules 컬럼이 비어 있거나 리스트가 아니면 빈 리스트"""
        return self.modules if isinstance(self.modules, list) else []

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"

    def __str__(self) -> str:
        return f"User: {self.email}"
