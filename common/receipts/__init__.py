from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class RawItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr


class RawReceipt(BaseModel):
    """Receipt document exactly as submitted by a client.

    The schema is closed: unknown keys, at the top level or inside an
    item, fail decoding. Values are kept as text; typing them is the
    validator's job.
    """

    model_config = ConfigDict(extra="forbid")

    retailer: StrictStr
    purchase_date: StrictStr = Field(alias="purchaseDate")
    purchase_time: StrictStr = Field(alias="purchaseTime")
    items: list[RawItem]
    total: StrictStr


class NormalizedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    price_cents: int


class NormalizedReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer: str
    purchase_date: date
    purchase_time: time
    total_cents: int
    item_count: int
    items: tuple[NormalizedItem, ...]
