from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.domain.entities import EditRequestTable


class IRecordRepository(ABC):
    """Read-only lookup of the finance record an edit request protects"""

    @abstractmethod
    async def get_record(
        self, table_name: EditRequestTable, record_id: str
    ) -> Optional[Dict[str, Any]]:
        """Get the record row as a column -> value mapping"""
        pass
