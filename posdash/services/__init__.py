"""
비즈니스 로직 서비스 모듈
"""

from posdash.services.auth_service import AuthService
from posdash.services.user_service import UserService
from posdash.services.category_service import CategoryService
from posdash.services.product_service import ProductService
from posdash.services.product_sync_service import ProductSyncService
from posdash.services.sale_service import SaleService
from posdash.services.expense_service import ExpenseService
from posdash.services.day_end_service import DayEndService
from posdash.services.employee_service import EmployeeService

__all__ = [
    "AuthService",
    "UserService",
    "CategoryService",
    "ProductService",
    "ProductSyncService",
    "SaleService",
    "ExpenseService",
    "DayEndService",
    "EmployeeService",
]
