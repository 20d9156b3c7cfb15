# domain/entities/data_point.py
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt

class DataPoint(BaseModel):
    """Representa uma única observação de negócio recebida na entrada."""
    id: StrictInt = Field(ge=0)
    market: StrictInt = Field(ge=0)
    price: StrictFloat
    volume: StrictFloat
    is_buy: StrictBool

    class Config:
        frozen = True
