# domain/entities/market_stats.py
from pydantic import BaseModel

class MarketStats(BaseModel):
    """
    Snapshot das estatísticas acumuladas de um mercado.
    Imutável: cada nova observação gera um snapshot inteiro novo.
    """
    market: int
    total_volume: float = 0.0
    mean_price: float = 0.0
    mean_volume: float = 0.0
    volume_weighted_mean_price: float = 0.0
    percent_buy: float = 0.0
    total_data_points: int = 0

    class Config:
        frozen = True

    @classmethod
    def empty(cls, market: int) -> "MarketStats":
        """Estado zerado usado na primeira observação de um mercado."""
        return cls(market=market)

    @property
    def is_empty(self) -> bool:
        return self.total_data_points == 0
