import pytest

from PizzaOPS_V1.core.results import HistoryPoint, HistorySeries


def _point(month, price=1.0, revenue=1000.0, net_income=100.0):
    return HistoryPoint(
        month=month, revenue=revenue, net_income=net_income, cash=5000.0, stock_price=price
    )


class TestHistorySeries:
    def test_append_increasing_months(self):
        series = HistorySeries([_point(1), _point(2)])
        series.append(_point(3))
        assert [p.month for p in series] == [1, 2, 3]
        assert len(series) == 3

    def test_rejects_non_increasing_month(self):
        series = HistorySeries([_point(1), _point(2)])
        with pytest.raises(ValueError):
            series.append(_point(2))

    def test_points_are_immutable_snapshot(self):
        series = HistorySeries([_point(1)])
        points = series.points
        series.append(_point(2))
        assert len(points) == 1
        with pytest.raises(Exception):
            points[0].month = 5

    def test_trailing(self):
        series = HistorySeries([_point(m) for m in range(1, 6)])
        assert [p.month for p in series.trailing(3)] == [3, 4, 5]
        assert len(series.trailing(10)) == 5
        assert series.trailing(0) == ()

    def test_stock_direction(self):
        series = HistorySeries([_point(1, price=2.0)])
        assert series.is_stock_up()
        series.append(_point(2, price=1.5))
        assert not series.is_stock_up()
        assert series.current_stock_price() == 1.5

    def test_empty(self):
        series = HistorySeries()
        assert series.latest is None
        assert series.current_stock_price() == 0.0

    def test_totals(self):
        series = HistorySeries([_point(1, net_income=-50.0), _point(2)])
        assert series.total_revenue() == 2000.0
        assert series.total_net_income() == 50.0
