from PizzaOPS_V1.core.results import HistoryPoint, HistorySeries
from PizzaOPS_V1.ui.affichage import format_to_dollar, print_balance_sheet, print_history


class TestFormat:
    def test_negative_in_parentheses(self):
        assert format_to_dollar(-1234.4) == "($1,234)"
        assert format_to_dollar(42000.0) == "$42,000"


class TestBalanceSheet:
    def test_net_fixed_assets_line(self, seed_state, capsys):
        seed_state.assets.accumulated_depreciation = 1200.0
        print_balance_sheet(seed_state)
        out = capsys.readouterr().out
        line = next(l for l in out.splitlines() if "Net fixed assets" in l)
        assert "$118,800" in line


class TestHistory:
    def test_totals_line(self, capsys):
        history = HistorySeries(
            [
                HistoryPoint(month=1, revenue=42000.0, net_income=1500.0, cash=75000.0, stock_price=3.76),
                HistoryPoint(month=2, revenue=40000.0, net_income=-2500.0, cash=70000.0, stock_price=3.50),
            ]
        )
        print_history(history)
        out = capsys.readouterr().out.splitlines()
        total = next(l for l in out if l.startswith("Total"))
        assert "$82,000" in total
        assert "($1,000)" in total
        assert sum(1 for l in out if "$75,000" in l or "$70,000" in l) == 2
