"""
StockStar Database Configuration
SQLAlchemy setup for the relational store
"""
from contextlib import contextmanager
from sqlite3 import Connection as SQLite3Connection
from typing import Generator, Iterator, List, Optional

from sqlalchemy import MetaData, create_engine, event, inspect, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings
from .logging import get_logger

logger = get_logger("database")


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine, with thread and pool options suited to SQLite files and memory"""
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Metadata with naming convention for constraints
Base = declarative_base(metadata=MetaData(naming_convention={
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}))


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off
    if isinstance(dbapi_connection, SQLite3Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db() -> Generator:
    """
    Dependency function to get database session

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    Run a block of writes as one atomic unit.

    Commits when the block finishes, rolls back and re-raises on any error so
    readers never see a partially written voucher.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


# Columns added to inventory_vouchers after the first release
LEGACY_VOUCHER_COLUMNS = {
    "remarks": "TEXT",
    "updated_at": "DATETIME",
    "updated_by": "INTEGER",
}


def upgrade_schema(bind: Engine) -> List[str]:
    """
    Add columns missing from tables created by older releases

    Returns:
        Names of the columns that were added
    """
    inspector = inspect(bind)
    if not inspector.has_table("inventory_vouchers"):
        return []

    existing = {column["name"].lower() for column in inspector.get_columns("inventory_vouchers")}
    added = []
    with bind.begin() as connection:
        for name, ddl_type in LEGACY_VOUCHER_COLUMNS.items():
            if name not in existing:
                connection.execute(text(f"ALTER TABLE inventory_vouchers ADD COLUMN {name} {ddl_type}"))
                added.append(name)

    if added:
        logger.info(f"Upgraded inventory_vouchers, added columns: {', '.join(added)}")
    return added


def seed_transaction_types(bind: Engine) -> int:
    """
    Insert any missing transaction type names; existing rows are left untouched

    Returns:
        Number of rows inserted
    """
    from stockstar.models.inventory import InventoryTransactionType, TransactionTypeName

    with Session(bind=bind) as session:
        existing = set(session.scalars(select(InventoryTransactionType.name)))
        missing = [t.value for t in TransactionTypeName if t.value not in existing]
        session.add_all(InventoryTransactionType(name=name) for name in missing)
        session.commit()

    if missing:
        logger.info(f"Seeded transaction types: {', '.join(missing)}")
    return len(missing)


def init_db(bind: Optional[Engine] = None):
    """
    Initialize database tables

    Creates tables, upgrades legacy columns and seeds transaction types.
    Safe to run on every start-up.
    """
    bind = bind or engine
    try:
        # Import all models to ensure they are registered with Base
        from stockstar.models import inventory, master  # noqa: F401

        Base.metadata.create_all(bind=bind)
        upgrade_schema(bind)
        seed_transaction_types(bind)
        logger.info("Database tables created successfully")

    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def check_db_connection() -> bool:
    """
    Check if database connection is working

    Returns:
        True if connection is successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
