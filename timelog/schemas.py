from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator
from typing import Optional, List, Dict
from datetime import datetime, date
import uuid

from timelog.scheduling.intervals import Category
from timelog.scheduling.clock import parse_clock

# Base schemas
class BaseSchema(BaseModel):
    """Base schema for all Pydantic models to inherit from."""
    model_config = ConfigDict(from_attributes=True)

# Token schemas
class Token(BaseSchema):
    """Schema for an authentication token."""
    access_token: str
    token_type: str = "bearer"

class TokenData(BaseSchema):
    """Schema for the data encoded in a token."""
    email: Optional[str] = None

# User schemas
class UserBase(BaseSchema):
    """Base schema for user properties."""
    email: EmailStr
    name: Optional[str] = None

class UserCreate(UserBase):
    """Schema for registering a new user."""
    password: str = Field(..., min_length=8)

class User(UserBase):
    """Schema for a user as returned by the API."""
    id: uuid.UUID

# Time log schemas
class TimeLogCreate(BaseSchema):
    """Schema for logging a new interval. Times are HH:MM on the given date; 24:00 ends the day."""
    date: date
    start_time: str = Field(..., json_schema_extra={'example': "09:00"})
    end_time: str = Field(..., json_schema_extra={'example': "10:30"})
    description: str = Field(..., min_length=1, json_schema_extra={'example': "Deep work on the report"})
    utilization: Category

    @field_validator("start_time", "end_time")
    @classmethod
    def check_clock_format(cls, v: str) -> str:
        parse_clock(v)
        return v

    @property
    def start_minute(self) -> int:
        return parse_clock(self.start_time)

    @property
    def end_minute(self) -> int:
        return parse_clock(self.end_time)

class TimeLog(BaseSchema):
    """Schema for a time log as returned by the API."""
    id: uuid.UUID
    local_day: date
    start_time: datetime
    end_time: datetime
    description: str
    utilization: Category
    created_at: Optional[datetime] = None

class TimeSlot(BaseSchema):
    """Compact HH:MM view of an occupied range, used by the range picker."""
    start_time: str
    end_time: str
    utilization: Category

# Day view schemas
class UtilizationSummary(BaseSchema):
    """Per-category totals for a day."""
    date: date
    hours: Dict[Category, float]
    minutes: Dict[Category, int]
    total_minutes: int
    total_hours: float

class TimelineItem(BaseSchema):
    """One painted block of the daily timeline, as fractions of the day."""
    id: Optional[str] = None
    left_fraction: float
    width_fraction: float
    category: Category

class DayTimeline(BaseSchema):
    date: date
    items: List[TimelineItem]

class SelectionResponse(BaseSchema):
    """Free range selected by choosing a minute on the range picker."""
    date: date
    minute: int
    state: str
    start_time: str
    end_time: str
    width_minutes: int

# Error schemas
class SchedulingErrorResponse(BaseSchema):
    """Body returned when the scheduling core rejects a request."""
    code: str
    detail: str
    conflicts: List[str] = Field(default_factory=list)

# System schemas
class HealthStatus(BaseSchema):
    """Schema for the health check response."""
    status: str
    service: str
    version: str
    database_connected: bool
    timestamp: datetime
