"""
Test Configuration and Fixtures
Shared testing infrastructure for StockStar
"""
import os

# Settings are read at import time; keep tests in memory and off the log files
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")

from datetime import date
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from stockstar.core.database import Base, build_engine, get_db, seed_transaction_types
from stockstar.main import app
from stockstar.models import InventoryTransactionType, Item, Site
from stockstar.schemas.inventory import InventoryVoucherIn, VoucherLineIn

# In-memory test engine (StaticPool keeps a single shared connection)
engine = build_engine("sqlite://")

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh, seeded database session for each test"""
    Base.metadata.create_all(bind=engine)
    seed_transaction_types(engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database dependency override"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def type_ids(db_session: Session) -> Dict[str, int]:
    """Transaction type ids keyed by name"""
    rows = db_session.execute(select(InventoryTransactionType.name, InventoryTransactionType.id))
    return {name: type_id for name, type_id in rows}


@pytest.fixture
def sites(db_session: Session) -> Dict[str, int]:
    """A godown and two job sites"""
    records = {
        "godown": Site(code="GD01", name="Central Godown", type="Warehouse"),
        "s1": Site(code="ST01", name="Alpha Site", type="Site"),
        "s2": Site(code="ST02", name="Beta Site", type="Site"),
    }
    db_session.add_all(records.values())
    db_session.commit()
    return {key: site.id for key, site in records.items()}


@pytest.fixture
def items(db_session: Session) -> Dict[str, int]:
    """Two stock items"""
    records = {
        "cement": Item(code="CEM-53", name="Cement Bag 53 Grade"),
        "rebar": Item(code="TMT-12", name="TMT Bar 12mm"),
    }
    db_session.add_all(records.values())
    db_session.commit()
    return {key: item.id for key, item in records.items()}


@pytest.fixture
def make_voucher(type_ids):
    """Build a voucher input from a type name and (item_id, quantity) lines"""
    def _make(type_name, lines, source=None, destination=None, voucher_date=None, remarks=None):
        return InventoryVoucherIn(
            voucher_date=voucher_date or date(2024, 1, 15),
            source_site_id=source,
            destination_site_id=destination,
            voucher_type_id=type_ids[type_name],
            remarks=remarks,
            created_by=1,
            items=[VoucherLineIn(item_id=item_id, quantity=qty) for item_id, qty in lines],
        )
    return _make
