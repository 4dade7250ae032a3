from dataclasses import dataclass, field
from typing import Dict
from uuid import UUID, uuid4

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.depends import get_unit_of_work
from src.domain.entities import MemberRole, MemberStatus, OrganizationMember

# Finance table owned by another module; only read for notification details
INCOME_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS income (
    id TEXT PRIMARY KEY,
    amount NUMERIC,
    date TEXT,
    description TEXT,
    source TEXT,
    category TEXT,
    payment_method TEXT
)
"""


@dataclass
class Organization:
    """Seeded organization; members by user_id since rollbacks expire ORM rows"""

    id: UUID
    members: Dict[str, UUID] = field(default_factory=dict)

    def user_id(self, name: str) -> UUID:
        return self.members[name]

    def headers(self, name: str) -> Dict[str, str]:
        token = generate_jwt(self.members[name], self.id)
        return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
        await conn.execute(text(INCOME_TABLE_DDL))
    yield engine
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS income"))
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def organization(db_session):
    org = Organization(id=uuid4())
    memberships = MembershipRepository(db_session)
    for name, role, status in [
        ("owner", MemberRole.owner, MemberStatus.active),
        ("admin", MemberRole.admin, MemberStatus.active),
        ("alice", MemberRole.member, MemberStatus.active),
        ("bob", MemberRole.member, MemberStatus.active),
        ("former", MemberRole.member, MemberStatus.revoked),
    ]:
        user_id = uuid4()
        await memberships.create(
            OrganizationMember(
                user_id=user_id, organization_id=org.id, role=role, status=status
            )
        )
        org.members[name] = user_id
    await db_session.commit()
    return org


@pytest_asyncio.fixture
async def income_record(db_session):
    await db_session.execute(
        text(
            "INSERT INTO income (id, amount, date, description, source) "
            "VALUES (:id, :amount, :date, :description, :source)"
        ),
        {
            "id": "R1",
            "amount": 1250,
            "date": "2026-03-01",
            "description": "Sunday offering",
            "source": "Offering",
        },
    )
    await db_session.commit()
    return "R1"
