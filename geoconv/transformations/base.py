# =============================================================================
# Base Class for Record Mappers
# =============================================================================
# Abstract base class for per-record mapping functions.
# =============================================================================

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

__all__ = ["RecordMapper"]


class RecordMapper(ABC):
    """
    Base class for all record mappers.

    A mapper turns one raw record into one output record. Mappers hold
    configuration only; no state is carried from one record to the next.
    """

    @abstractmethod
    def map_record(self, raw: Any) -> BaseModel:
        """
        Map one raw record to one output record.

        Args:
            raw: Raw record produced by a source reader

        Returns:
            Output record ready for a sink writer

        Raises:
            MalformedFieldError: If a field of the record is invalid
        """
        pass
