"""Shared fixtures: in-memory database, fake identity provider and processor."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone
from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import courtbook.models  # noqa: F401
from courtbook.api.deps import get_identity_verifier, get_payment_processor
from courtbook.core.database import Base, get_db
from courtbook.core.exceptions import InternalException, UnauthenticatedException
from courtbook.main import app
from courtbook.models import Booking, Coupon, Court, Payment, User
from courtbook.services.auth import Identity

TOKEN_PREFIX = "token-for:"


class FakeIdentityVerifier:
    """Accepts ``token-for:<email>`` and rejects everything else."""

    async def verify(self, token: str) -> Identity:
        if not token.startswith(TOKEN_PREFIX):
            raise UnauthenticatedException("Invalid token")
        return Identity(email=token[len(TOKEN_PREFIX):], uid="uid-test")


class FakePaymentProcessor:
    def __init__(self):
        self.amounts: List[int] = []
        self.fail = False

    async def create_payment_intent(self, amount: int) -> str:
        if self.fail:
            raise InternalException("Failed to create payment intent")
        self.amounts.append(amount)
        return f"pi_test_{amount}_secret_abc"


def auth(email: str) -> dict:
    return {"Authorization": f"Bearer {TOKEN_PREFIX}{email}"}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def processor():
    return FakePaymentProcessor()


@pytest_asyncio.fixture
async def client(session_factory, processor):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_verifier] = FakeIdentityVerifier
    app.dependency_overrides[get_payment_processor] = lambda: processor
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class Store:
    """Seeds and reads rows through short-lived sessions."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def add(self, instance):
        async with self.session_factory() as session:
            session.add(instance)
            await session.commit()
            await session.refresh(instance)
            return instance

    async def get(self, model, id):
        async with self.session_factory() as session:
            return await session.get(model, id)

    async def user(self, email: str, role: str = "user", **fields) -> User:
        return await self.add(User(email=email, role=role, **fields))

    async def court(self, **fields) -> Court:
        values = {"type": "Tennis", "image": "https://img/court.png", "price": 25.0, "slot_times": ["10:00", "11:00"]}
        values.update(fields)
        return await self.add(Court(**values))

    async def booking(self, court: Court, email: str, status: str = "pending", **fields) -> Booking:
        values = {
            "court_id": court.id,
            "court_name": f"{court.type} Court",
            "user_email": email,
            "date": "2026-11-02",
            "slots": ["10:00"],
            "total_price": 50.0,
            "status": status,
        }
        values.update(fields)
        return await self.add(Booking(**values))

    async def coupon(self, code: str, discount: float = 10.0, expires_in: timedelta = timedelta(days=7)) -> Coupon:
        return await self.add(
            Coupon(code=code, discount=discount, expiry=datetime.now(timezone.utc) + expires_in)
        )

    async def payments(self) -> List[Payment]:
        async with self.session_factory() as session:
            result = await session.execute(select(Payment))
            return list(result.scalars().all())


@pytest.fixture
def store(session_factory):
    return Store(session_factory)


@pytest_asyncio.fixture
async def admin(store):
    return await store.user("admin@example.com", role="admin", name="Ada")
