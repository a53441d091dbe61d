"""
직원 서비스
"""

from sqlalchemy.orm import Session

from posdash.core.exceptions import EmployeeNotFoundException
from posdash.models.employee import Employee
from posdash.schemas.employee import EmployeeCreateRequest, EmployeeUpdateRequest


class EmployeeService:
    """직원 CRUD"""

    @staticmethod
    def list_employees(
        db: Session, name: str | None = None, city: str | None = None
    ) -> list[Employee]:
        """이름 부분 일치, 도시 정확히 일치로 필터링합니다 (최근 등록 순)."""
        query = db.query(Employee)
        if name:
            query = query.filter(Employee.name.ilike(f"%{name}%"))
        if city:
            query = query.filter(Employee.city == city)
        return query.order_by(Employee.created_at.desc(), Employee.id.desc()).all()

    @staticmethod
    def count_employees(db: Session) -> int:
        return db.query(Employee).count()

    @staticmethod
    def get_employee(employee_id: int, db: Session) -> Employee:
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if not employee:
            raise EmployeeNotFoundException(employee_id)
        return employee

    @staticmethod
    def create_employee(data: EmployeeCreateRequest, db: Session) -> Employee:
        employee = Employee(**data.model_dump())
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def update_employee(
        employee_id: int, data: EmployeeUpdateRequest, db: Session
    ) -> Employee:
        employee = EmployeeService.get_employee(employee_id, db)
        for field, value in data.model_dump(exclude_unset=True).items():
            # cnic만 null로 비울 수 있음
            if value is None and field != "cnic":
                continue
            setattr(employee, field, value)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(employee)
        return employee

    @staticmethod
    def delete_employee(employee_id: int, db: Session) -> None:
        employee = EmployeeService.get_employee(employee_id, db)
        db.delete(employee)
        db.commit()
