"""
Employee 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from posdash.db.database import Base


class Employee(Base):
    """
    매장 직원 모델 (판매 커미션 집계 대상)

    Attributes:
        name: 이름
        phone_number: 연락처
        city / address: 거주 도시 / 주소
        cnic: 신분증 번호 (Nullable)
    """

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    phone_number = Column(String(50), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    address = Column(Text, nullable=False)
    cnic = Column(String(50), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}')>"
