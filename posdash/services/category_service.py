"""
카테고리 서비스
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from posdash.core.exceptions import (
    CategoryNotFoundException,
    CategoryAlreadyExistsException,
)
from posdash.models.category import Category
from posdash.models.product import Product
from posdash.schemas.category import CategoryRequest, CategoryResponse


class CategoryService:
    """카테고리 CRUD"""

    @staticmethod
    def _to_response(category: Category, products_count: int) -> CategoryResponse:
        response = CategoryResponse.model_validate(category)
        response.products_count = products_count
        return response

    @staticmethod
    def list_categories(db: Session) -> list[CategoryResponse]:
        """이름순 카테고리 목록 (상품 수 포함)"""
        rows = (
            db.query(Category, func.count(Product.id))
            .outerjoin(Product, Product.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.name.asc())
            .all()
        )
        return [CategoryService._to_response(c, count) for c, count in rows]

    @staticmethod
    def get_category(category_id: int, db: Session) -> Category:
        category = db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise CategoryNotFoundException(category_id)
        return category

    @staticmethod
    def _ensure_slug_available(slug: str, db: Session, exclude_id: int | None = None):
        query = db.query(Category).filter(Category.slug == slug)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise CategoryAlreadyExistsException(slug)

    @staticmethod
    def create_category(data: CategoryRequest, db: Session) -> CategoryResponse:
        """
        Raises:
            CategoryAlreadyExistsException: slug 중복
        """
        CategoryService._ensure_slug_available(data.slug, db)

        category = Category(
            name=data.name, slug=data.slug, description=data.description
        )
        db.add(category)
        db.commit()
        db.refresh(category)
        return CategoryService._to_response(category, 0)

    @staticmethod
    def update_category(
        category_id: int, data: CategoryRequest, db: Session
    ) -> CategoryResponse:
        category = CategoryService.get_category(category_id, db)
        CategoryService._ensure_slug_available(data.slug, db, exclude_id=category_id)

        category.name = data.name
        category.slug = data.slug
        category.description = data.description
        db.commit()
        db.refresh(category)

        count = db.query(Product).filter(Product.category_id == category.id).count()
        return CategoryService._to_response(category, count)

    @staticmethod
    def delete_category(category_id: int, db: Session) -> None:
        """카테고리를 삭제하고 소속 상품의 category_id를 NULL로 만듭니다."""
        category = CategoryService.get_category(category_id, db)
        db.query(Product).filter(Product.category_id == category_id).update(
            {Product.category_id: None}, synchronize_session=False
        )
        db.delete(category)
        db.commit()
