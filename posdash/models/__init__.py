"""
SQLAlchemy 데이터베이스 모델

모든 데이터베이스 모델을 이 모듈에서 import하여 export합니다.
"""

from posdash.models.user import User
from posdash.models.category import Category
from posdash.models.product import Product, ProductVariant
from posdash.models.expense import Expense, ExpenseTitle
from posdash.models.sale import Sale, SaleItem
from posdash.models.day_end import DayEnd
from posdash.models.employee import Employee

__all__ = [
    "User",
    "Category",
    "Product",
    "ProductVariant",
    "Expense",
    "ExpenseTitle",
    "Sale",
    "SaleItem",
    "DayEnd",
    "Employee",
]
