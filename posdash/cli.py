#!/usr/bin/env python3
"""
관리자 CLI (posdash-admin)

DB 초기화, 관리자 계정 생성, 테이블 점검, Shopify 상품 동기화를 실행합니다.

사용 예:
    posdash-admin init-db
    posdash-admin create-admin --email admin@shop.pk --password secret123
    posdash-admin check-db
    posdash-admin sync-products --batch-size 1000 --offset 0
"""

import argparse
import logging
import sys

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from posdash.core.config import get_settings
from posdash.core.exceptions import (
    ShopifyAPIException,
    ShopifyNotConfiguredException,
    SyncInProgressException,
)
from posdash.core.logging_config import setup_logging
from posdash.core.security import hash_password, normalize_email
from posdash.db.database import Base
from posdash.db.redis_client import create_redis_client
from posdash.integrations.shopify import ShopifyClient
from posdash.models.user import User
from posdash.services.product_sync_service import ProductSyncService

logger = logging.getLogger(__name__)


def _banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def init_db(engine: Engine) -> int:
    """모든 테이블을 생성합니다 (이미 있으면 건너뜀)."""
    # 모델 등록
    import posdash.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    print(f"✅ Created tables: {', '.join(sorted(Base.metadata.tables))}")
    return 0


def create_admin(session_factory, email: str, password: str, name: str) -> int:
    """admin 권한 계정을 생성합니다. 이미 있는 이메일이면 1을 반환합니다."""
    email = normalize_email(email)
    if len(password) < 6:
        print("❌ Password must be at least 6 characters")
        return 1

    with session_factory() as db:
        if db.query(User).filter(User.email == email).first():
            print(f"❌ User already exists: {email}")
            return 1

        user = User(
            email=email,
            password=hash_password(password),
            name=name,
            role="admin",
            status="active",
            modules=[],
        )
        db.add(user)
        db.commit()
        print(f"✅ Admin user created: {email} (ID: {user.id})")
    return 0


def check_db(engine: Engine, session_factory) -> int:
    """테이블별 레코드 수를 출력합니다."""
    import posdash.models  # noqa: F401

    _banner("Database Check")
    print(f"Target: {engine.url.render_as_string(hide_password=True)}")

    with session_factory() as db:
        for name, table in sorted(Base.metadata.tables.items()):
            count = db.execute(select(func.count()).select_from(table)).scalar()
            print(f"  {name:<20} {count:>8}")
    print("=" * 60)
    return 0


def sync_products(session_factory, batch_size: int, offset: int, full: bool) -> int:
    """Shopify 상품 배치 동기화를 실행하고 결과를 출력합니다."""
    settings = get_settings()
    if full:
        batch_size, offset = 50000, 0

    _banner("Shopify Product Sync")
    print(f"Store: {settings.shopify_store_domain or '(not configured)'}")
    print(f"Batch: offset={offset}, size={batch_size}")

    client = ShopifyClient(settings)
    redis = create_redis_client(settings)
    try:
        with session_factory() as db:
            result = ProductSyncService.sync_batch(
                client, db, redis, settings, max_products=batch_size, offset=offset
            )
    except (
        ShopifyNotConfiguredException,
        ShopifyAPIException,
        SyncInProgressException,
    ) as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        client.session.close()
        redis.close()

    print(f"Imported: {result['imported']}")
    print(f"Failed:   {result['failed']}")
    print(f"Total:    {result['total']}")
    if result.get("message"):
        print(result["message"])
    elif result["has_more"]:
        print(f"More products remain. Next: --offset {result['next_offset']}")
    print("=" * 60 + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="posdash-admin", description="POS dashboard admin tasks"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin user")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--name", default="Admin")

    subparsers.add_parser("check-db", help="Print row counts per table")

    sync_parser = subparsers.add_parser(
        "sync-products", help="Sync products from Shopify"
    )
    sync_parser.add_argument(
        "--batch-size",
        type=int,
        default=1000,
        help="Products per batch (default: 1000)",
    )
    sync_parser.add_argument(
        "--offset", type=int, default=0, help="Start offset (default: 0)"
    )
    sync_parser.add_argument(
        "--full", action="store_true", help="Sync up to 50000 products from offset 0"
    )
    return parser


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(get_settings().log_level)

    if engine is None:
        from posdash.db.database import engine
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    if args.command == "init-db":
        return init_db(engine)
    if args.command == "create-admin":
        return create_admin(session_factory, args.email, args.password, args.name)
    if args.command == "check-db":
        return check_db(engine, session_factory)
    return sync_products(session_factory, args.batch_size, args.offset, args.full)


if __name__ == "__main__":
    sys.exit(main())
