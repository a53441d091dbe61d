"""
사용자 관리 서비스
"""

import logging

from sqlalchemy.orm import Session

from posdash.core.security import hash_password, normalize_email
from posdash.core.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
    SelfDeletionException,
)
from posdash.models.user import User
from posdash.schemas.user import UserCreateRequest, UserUpdateRequest

logger = logging.getLogger(__name__)


class UserService:
    """대시보드 계정 CRUD"""

    @staticmethod
    def list_users(db: Session) -> list[User]:
        """최근 생성 순으로 전체 사용자를 조회합니다."""
        return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    @staticmethod
    def get_user(user_id: int, db: Session) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise UserNotFoundException(user_id)
        return user

    @staticmethod
    def create_user(data: UserCreateRequest, db: Session) -> User:
        """
        새 사용자를 생성합니다.

        Raises:
            UserAlreadyExistsException: 이미 등록된 이메일인 경우
        """
        email = normalize_email(data.email)
        if db.query(User).filter(User.email == email).first():
            raise UserAlreadyExistsException(email)

        user = User(
            email=email,
            password=hash_password(data.password),
            name=data.name,
            role=data.role,
            status=data.status,
            modules=data.modules or [],
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info("Created user %s (role=%s)", user.email, user.role)
        return user

    @staticmethod
    def update_user(user_id: int, data: UserUpdateRequest, db: Session) -> User:
        """
        전달된 필드만 수정합니다. 비밀번호는 다시 해싱합니다.

        Raises:
            UserNotFoundException: 사용자가 없는 경우
            UserAlreadyExistsException: 다른 사용자가 이미 쓰는 이메일인 경우
        """
        user = UserService.get_user(user_id, db)
        changes = data.model_dump(exclude_unset=True)

        if changes.get("email") is not None:
            email = normalize_email(changes["email"])
            duplicate = (
                db.query(User).filter(User.email == email, User.id != user_id).first()
            )
            if duplicate:
                raise UserAlreadyExistsException(email, "Email already exists")
            user.email = email

        if changes.get("password"):
            user.password = hash_password(changes["password"])

        for field in ("name", "role", "status"):
            if changes.get(field) is not None:
                setattr(user, field, changes[field])

        if "modules" in changes:
            user.modules = changes["modules"] or []

        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def delete_user(user_id: int, current_user_id: int, db: Session) -> None:
        """
        Raises:
            UserNotFoundException: 사용자가 없는 경우
            SelfDeletionException: 자기 자신을 삭제하려는 경우
        """
        user = UserService.get_user(user_id, db)
        if user.id == current_user_id:
            raise SelfDeletionException(user_id)

        db.delete(user)
        db.commit()
        logger.info("Deleted user %s", user.email)
