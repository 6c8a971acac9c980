from typing import Annotated, List
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

# Largest value a SQL BIGINT / SQLite INTEGER column holds
MAX_ID = 2**63 - 1

RowId = Annotated[StrictInt, Field(ge=1, le=MAX_ID)]


class EntryIn(BaseModel):
    """Request body of POST /api/entry and PUT /api/entry/<id>."""
    model_config = ConfigDict(populate_by_name=True)

    text: StrictStr
    competency_ids: List[RowId] = Field(default_factory=list, alias="competencyIDs")

    @field_validator("competency_ids")
    @classmethod
    def _distinct(cls, ids: List[int]) -> List[int]:
        # Keep the first occurrence of each id, in request order
        return list(dict.fromkeys(ids))


def describe_errors(exc) -> str:
    """Flatten pydantic's error list into a single readable message."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)
