"""
Доменная модель контекста платежей.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared_kernel import EntityId, generate_id


class PaymentStatus(str, Enum):
    """Статусы платежа."""

    SUCCESS = "success"


class PaymentApiResponse(BaseModel):
    """Ответ платежного шлюза."""

    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: Optional[str] = None


class PaymentRecord(BaseModel):
    """Запись об учтенном платеже."""

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    amount: Decimal = Field(..., gt=0)
    status: PaymentStatus
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
