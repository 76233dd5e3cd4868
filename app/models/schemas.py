from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


# --- Category Models ---
class Category(BaseModel):
    id: int | str
    name: str

    class Config:
        frozen = True


# --- Transaction Models ---
class Transaction(BaseModel):
    id: int | str
    amount: Decimal = Field(gt=0)
    category_id: int | str
    type: TransactionType
    date: datetime | None = None  # Not used by the insight logic

    class Config:
        frozen = True


# --- AI Insight Models ---
class InsightRequest(BaseModel):
    transactions: list[Transaction] = []
    categories: list[Category] = []


class InsightResponse(BaseModel):
    insights: str
