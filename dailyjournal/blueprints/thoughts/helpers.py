from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List

from ...store import EntryRecord


@dataclass
class Thought:
    """An entry as the views show it; never persisted."""
    id: int
    text: str
    time: str
    # ISO-8601 UTC; the page script re-renders `time` in the browser's zone
    timestamp: str
    competencies: List[int]


def format_thought_time(value: datetime) -> str:
    """
    Render a timestamp the way an en-US locale does with short month,
    2-digit day and hour, e.g. "Oct 16, 2026, 09:05 AM".
    """
    return value.strftime("%b %d, %Y, %I:%M %p")


def to_thoughts(records: Iterable[EntryRecord]) -> List[Thought]:
    return [
        Thought(
            id=r.id,
            text=r.text,
            time=format_thought_time(r.created_at),
            timestamp=r.created_at.isoformat() + "Z",
            competencies=list(r.competencies),
        )
        for r in records
    ]


def skill_names(competency_ids: Iterable[int], catalog: Dict[int, str]) -> List[str]:
    """Skill names for the given ids; ids missing from the catalog show as '#<id>'."""
    return [catalog.get(cid, f"#{cid}") for cid in competency_ids]
