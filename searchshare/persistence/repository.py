"""
Analysis Repository

Keeps saved brand analyses so the HTTP surface can list, reload and
delete them. The engine never touches a repository; callers pass results
in explicitly.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..models import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class StoredAnalysis:
    """A saved analysis with its metadata."""
    id: str
    brand_name: str
    domain: Optional[str]
    created_at: datetime
    analysis: AnalysisResult

    def summary(self) -> Dict[str, Any]:
        """Listing view without the full breakdowns."""
        return {
            "id": self.id,
            "brand_name": self.brand_name,
            "domain": self.domain,
            "created_at": self.created_at.isoformat(),
            "share_of_search": self.analysis.sos.share_of_search,
            "share_of_voice": self.analysis.sov.share_of_voice,
            "gap": self.analysis.gap.gap,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.summary(),
            "analysis": self.analysis.to_dict(),
        }


class AnalysisRepository(ABC):
    """Abstract base class for analysis repositories."""

    @abstractmethod
    def save(self, analysis: AnalysisResult, brand_name: str, domain: Optional[str] = None) -> StoredAnalysis:
        """Save an analysis. Returns the stored entry with its id."""
        pass

    @abstractmethod
    def list(self) -> List[StoredAnalysis]:
        """List saved analyses, newest first."""
        pass

    @abstractmethod
    def get(self, analysis_id: str) -> Optional[StoredAnalysis]:
        """Load an analysis by id."""
        pass

    @abstractmethod
    def delete(self, analysis_id: str) -> bool:
        """Delete an analysis. Returns False if it did not exist."""
        pass


class InMemoryAnalysisRepository(AnalysisRepository):
    """
    Process-local repository.

    Holds at most ``max_entries`` analyses; saving beyond that evicts the
    oldest one.
    """

    def __init__(self, max_entries: int = 10):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, StoredAnalysis]" = OrderedDict()
        self._lock = threading.Lock()

    def save(self, analysis: AnalysisResult, brand_name: str, domain: Optional[str] = None) -> StoredAnalysis:
        entry = StoredAnalysis(
            id=str(uuid.uuid4()),
            brand_name=brand_name,
            domain=domain,
            created_at=datetime.now(timezone.utc),
            analysis=analysis,
        )
        with self._lock:
            self._entries[entry.id] = entry
            while len(self._entries) > self.max_entries:
                evicted_id, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted analysis {evicted_id}")

        logger.info(f"Saved analysis {entry.id} for {brand_name}")
        return entry

    def list(self) -> List[StoredAnalysis]:
        with self._lock:
            return list(reversed(self._entries.values()))

    def get(self, analysis_id: str) -> Optional[StoredAnalysis]:
        with self._lock:
            return self._entries.get(analysis_id)

    def delete(self, analysis_id: str) -> bool:
        with self._lock:
            removed = self._entries.pop(analysis_id, None)
        if removed:
            logger.info(f"Deleted analysis {analysis_id}")
        return removed is not None

    def __len__(self) -> int:
        return len(self._entries)
