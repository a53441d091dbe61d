"""
직원 API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.core.exceptions import EmployeeNotFoundException
from posdash.schemas.common import SuccessResponse
from posdash.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
    EmployeeEnvelope,
    EmployeeListResponse,
    EmployeeStatsResponse,
)
from posdash.services.employee_service import EmployeeService


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=EmployeeListResponse)
def list_employees(
    name: str | None = None,
    city: str | None = None,
    db: Session = Depends(get_db),
):
    """직원 목록 (name: 부분 일치, city: 정확히 일치)"""
    return {"success": True, "employees": EmployeeService.list_employees(db, name, city)}


@router.get("/stats", response_model=EmployeeStatsResponse)
def employee_stats(db: Session = Depends(get_db)):
    return {"success": True, "total_employees": EmployeeService.count_employees(db)}


@router.post("", response_model=EmployeeEnvelope, status_code=status.HTTP_201_CREATED)
def create_employee(data: EmployeeCreateRequest, db: Session = Depends(get_db)):
    """
    직원을 등록합니다.

    Example:
        Request:
        ```json
        {
            "name": "Ali Raza",
            "phone_number": "03001234567",
            "city": "Lahore",
            "address": "Main Boulevard, Gulberg"
        }
        ```
    """
    return {"success": True, "employee": EmployeeService.create_employee(data, db)}


@router.get("/{employee_id}", response_model=EmployeeEnvelope)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    try:
        employee = EmployeeService.get_employee(employee_id, db)
    except EmployeeNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "employee": employee}


@router.put("/{employee_id}", response_model=EmployeeEnvelope)
def update_employee(
    employee_id: int, data: EmployeeUpdateRequest, db: Session = Depends(get_db)
):
    try:
        employee = EmployeeService.update_employee(employee_id, data, db)
    except EmployeeNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "employee": employee}


@router.delete("/{employee_id}", response_model=SuccessResponse)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    try:
        EmployeeService.delete_employee(employee_id, db)
    except EmployeeNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return SuccessResponse(message="Employee deleted successfully")
