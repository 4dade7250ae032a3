from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.record_repository import IRecordRepository
from src.domain.entities import EditRequestTable

# Edit request table names -> finance tables owned by the finance module
RECORD_TABLES: Dict[EditRequestTable, str] = {
    EditRequestTable.income: "income",
    EditRequestTable.expense: "expenses",
    EditRequestTable.pledge_payment: "pledge_payments",
    EditRequestTable.pledge_record: "pledge_records",
}


class RecordRepository(IRecordRepository):
    """Raw finance record lookup; the tables are not modelled by this service"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_record(
        self, table_name: EditRequestTable, record_id: str
    ) -> Optional[Dict[str, Any]]:
        """Get the record row as a column -> value mapping"""
        stmt = text(f"SELECT * FROM {RECORD_TABLES[table_name]} WHERE id = :record_id")
        result = await self.session.execute(stmt, {"record_id": record_id})
        row = result.mappings().first()
        return dict(row) if row is not None else None
