from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

class BudgetType(str, Enum):
    INCOME = "Приход"
    EXPENSE = "Расход"
    COMMISSION = "Комиссия"

class BudgetRecord(BaseModel):
    id: Optional[int] = None
    year: int
    month: int
    amount: int  # unités mineures
    type: BudgetType
    author_id: Optional[int] = Field(default=None, alias="authorId")

    class Config:
        from_attributes = True
        populate_by_name = True
        frozen = True

class BudgetYearParam(BaseModel):
    year: int
    limit: int
    offset: int = 0
    author_name: Optional[str] = Field(default=None, alias="authorName")

    class Config:
        populate_by_name = True

class BudgetYearStatsResponse(BaseModel):
    total: int
    total_by_type: Dict[str, int] = Field(alias="totalByType")
    items: List[BudgetRecord]

    class Config:
        populate_by_name = True
