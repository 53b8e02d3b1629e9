"""
pdm/data/models.py
──────────────────
Pydantic v2 data models for equipment, sensor readings, predictions,
alerts and work orders.

Wire format uses camelCase keys (``equipmentId``, ``createdAt``) and integer
epoch-millisecond timestamps; Python attributes stay snake_case.
"""
from __future__ import annotations

import time
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.alerts import AlertLevel, RiskStatus, WorkOrderStatus


def now_ms() -> int:
    return int(time.time() * 1000)


def new_id() -> str:
    return str(uuid.uuid4())


class WireModel(BaseModel):
    """Base for records serialized to the REST API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Equipment(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str
    location: str
    model: str
    warranty_date: str


class Reading(WireModel):
    equipment_id: str
    timestamp: int = Field(default_factory=now_ms)
    temperature: float = Field(ge=20.0, le=130.0)
    vibration: float = Field(ge=0.1, le=12.0)
    pressure: float = Field(ge=0.5, le=15.0)
    rpm: int = Field(ge=200, le=4000)


class Prediction(BaseModel):
    failure_probability: float = Field(ge=0.0, le=1.0)
    status: RiskStatus


class Alert(WireModel):
    id: str = Field(default_factory=new_id)
    equipment_id: str
    level: AlertLevel
    message: str
    created_at: int = Field(default_factory=now_ms)
    acknowledged: bool = False


class WorkOrder(WireModel):
    id: str = Field(default_factory=new_id)
    equipment_id: str
    title: str
    notes: str = ""
    status: WorkOrderStatus = WorkOrderStatus.OPEN
    created_at: int = Field(default_factory=now_ms)


# ── Request payloads ──────────────────────────────────────────────────────────


class AlertCreate(WireModel):
    equipment_id: str = Field(min_length=1)
    level: AlertLevel
    message: str = ""


class WorkOrderCreate(WireModel):
    equipment_id: str = Field(min_length=1)
    title: str
    notes: str | None = ""

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("notes")
    @classmethod
    def _notes_default(cls, value: str | None) -> str:
        return value or ""
