from pydantic import BaseModel, Field


class WilayaOut(BaseModel):
    id: int
    code: int
    name_ar: str
    name_en: str
    shipping_price: float
    is_active: bool

    model_config = {"from_attributes": True}


class WilayaUpdate(BaseModel):
    shipping_price: float | None = Field(default=None, ge=0)
    is_active: bool | None = None


class WilayaBulkUpdate(BaseModel):
    default_price: float = Field(ge=0)
