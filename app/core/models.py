# app/core/models.py

from typing import Literal

from pydantic import BaseModel, ConfigDict

TransactionType = Literal["income", "expense"]


class UserCreate(BaseModel):
    """Registration payload."""
    username: str
    password: str
    name: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str


class WorkSessionCreate(BaseModel):
    """Work session input. Earnings fields are computed server-side."""
    date: int  # epoch ms
    start_time: str
    end_time: str
    break_minutes: int = 0
    hourly_rate: float
    description: str | None = None
    is_holiday: bool | None = None  # None = look up in the holiday calendar


class WorkSessionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: int
    start_time: str
    end_time: str
    break_minutes: int
    hourly_rate: float
    description: str
    is_holiday: bool
    hours_worked: float
    total_earnings: float
    regular_hours: float | None = None
    overtime_hours: float | None = None
    regular_earnings: float | None = None
    overtime_earnings: float | None = None
    holiday_earnings: float | None = None


class HolidayCreate(BaseModel):
    date: int
    name: str
    description: str | None = None


class HolidayOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: int
    name: str
    description: str


class TransactionCreate(BaseModel):
    amount: float
    description: str
    category: str
    type: TransactionType
    date: int | None = None  # defaults to now


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: float
    description: str
    category: str
    type: TransactionType
    date: int


class CategoryCreate(BaseModel):
    name: str
    type: TransactionType
    color: str


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: TransactionType
    color: str
