from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class HistoryPoint(BaseModel):
    """Snapshot des principaux KPI d'un mois clôturé (immuable)."""

    model_config = ConfigDict(frozen=True)

    month: int
    revenue: float
    net_income: float
    cash: float
    stock_price: float


class HistorySeries:
    """Série chronologique append-only des mois clôturés.

    Alimente les graphiques et la revue trimestrielle de l'analyste.
    """

    def __init__(self, points: Optional[List[HistoryPoint]] = None):
        self._points: List[HistoryPoint] = []
        for point in points or []:
            self.append(point)

    def append(self, point: HistoryPoint) -> None:
        if self._points and point.month <= self._points[-1].month:
            raise ValueError(
                f"Mois {point.month} antérieur ou égal au dernier point ({self._points[-1].month})"
            )
        self._points.append(point)

    @property
    def points(self) -> Tuple[HistoryPoint, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[HistoryPoint]:
        return iter(self.points)

    @property
    def latest(self) -> Optional[HistoryPoint]:
        return self._points[-1] if self._points else None

    @property
    def previous(self) -> Optional[HistoryPoint]:
        return self._points[-2] if len(self._points) > 1 else None

    def trailing(self, n: int) -> Tuple[HistoryPoint, ...]:
        """Les `n` derniers points (moins s'il n'y en a pas assez)."""
        if n <= 0:
            return ()
        return tuple(self._points[-n:])

    def current_stock_price(self) -> float:
        return self.latest.stock_price if self.latest else 0.0

    def is_stock_up(self) -> bool:
        """Vrai si le cours n'a pas baissé depuis le point précédent."""
        current = self.current_stock_price()
        previous = self.previous.stock_price if self.previous else current
        return current >= previous

    def total_revenue(self) -> float:
        return sum(p.revenue for p in self._points)

    def total_net_income(self) -> float:
        return sum(p.net_income for p in self._points)
