from typing import List

from PizzaOPS_V1.console_style import bold, cyan, dim, red, signed, yellow
from PizzaOPS_V1.core.analyst import AnalystReport
from PizzaOPS_V1.core.results import HistoryPoint, HistorySeries
from PizzaOPS_V1.domain.financial_state import FinancialState
from PizzaOPS_V1.domain.strategy import Strategy


def format_to_dollar(x: float) -> str:
    """Format a float as a dollar amount (no decimals, negatives in parentheses)."""
    if x < 0:
        return f"(${-x:,.0f})"
    return f"${x:,.0f}"


def _pct(a: float, b: float) -> str:
    """Ratio a/b formaté en pourcentage, "—" si b <= 0."""
    if b <= 0:
        return "—"
    return f"{a / b * 100.0:5.1f}%"


def _bar(current: float, maxv: float, width: int = 24, fill_char: str = "█") -> str:
    """Barre de progression texte (satisfaction, etc.)."""
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + " " * (width - n)


def _line(label: str, value: float, width: int = 32) -> str:
    return f"{label:<{width}}{format_to_dollar(value):>14}"


def print_income_statement(state: FinancialState, title: str = "Income Statement"):
    print(f"\n📊 {bold(title)}")
    print("=" * 46)
    print(f"💶 {_line('Revenue', state.revenue)}")
    print(f"🛒 {_line('Cost of goods sold', -state.cogs)}")
    print(f"   {_line('Gross profit', state.gross_profit)}  {_pct(state.gross_profit, state.revenue)}")
    print(f"🛠 {_line('Operating expenses', -state.operating_expenses)}")
    print(f"📉 {_line('Strategy amortization', -state.amortization_expense)}")
    print("-" * 46)
    print(f"   {_line('EBITDA', state.ebitda)}")
    print(f"   {_line('Depreciation', -state.depreciation)}")
    print(f"   {_line('EBIT', state.ebit)}")
    print(f"🏦 {_line('Interest', -state.interest)}")
    print(f"   {_line('Taxes', -state.tax)}")
    print("-" * 46)
    print(
        f"📈 {signed(_line('Net income', state.net_income), state.net_income)}"
        f"  {_pct(state.net_income, state.revenue)}"
    )
    if state.one_time_expenses:
        print(dim(f"   One-time expenses this month: {format_to_dollar(state.one_time_expenses)}"))
    print("=" * 46)


def print_balance_sheet(state: FinancialState, title: str = "Balance Sheet"):
    assets = state.assets
    liabilities = state.liabilities
    equity = state.equity

    print(f"\n📒 {bold(title)}")
    print("=" * 46)
    print("ASSETS")
    print(f"💰 {_line('Cash', assets.cash)}")
    print(f"   {_line('Accounts receivable', assets.accounts_receivable)}")
    print(f"📦 {_line('Inventory', assets.inventory)}")
    print(f"   {_line('Prepaid expenses', assets.prepaid_expenses)}")
    print(f"🏭 {_line('Equipment', assets.equipment)}")
    print(f"   {_line('(-) Accumulated depreciation', -assets.accumulated_depreciation)}")
    print(f"   {_line('Net fixed assets', state.net_fixed_assets)}")
    print(f"👉 {_line('TOTAL ASSETS', state.total_assets)}")
    print("-" * 46)
    print("LIABILITIES")
    print(f"   {_line('Accounts payable', liabilities.accounts_payable)}")
    print(f"   {_line('Accrued expenses', liabilities.accrued_expenses)}")
    print(f"🏦 {_line('Loans', liabilities.loans)}")
    print(f"   {_line('Total liabilities', state.total_liabilities)}")
    print("EQUITY")
    print(f"   {_line('Contributed capital', equity.contributed_capital)}")
    print(f"   {_line('Retained earnings', equity.retained_earnings)}")
    print(f"👉 {_line('TOTAL LIAB. + EQUITY', state.total_liabilities + state.total_equity)}")
    gap = state.balance_gap()
    if not state.is_balanced():
        print(red(f"⚠️ Balance gap: {gap:,.2f}"))
    print("=" * 46)


def print_cash_flow(state: FinancialState, previous: FinancialState):
    """Tableau de flux simplifié entre deux clôtures (méthode indirecte)."""
    operating = state.net_income + state.depreciation + state.amortization_expense
    working_capital = (
        (state.liabilities.accounts_payable - previous.liabilities.accounts_payable)
        - (state.assets.accounts_receivable - previous.assets.accounts_receivable)
        - (state.assets.inventory - previous.assets.inventory)
    )
    net_change = state.cash - previous.cash

    print(f"\n💸 {bold('Cash Flow')}")
    print("=" * 46)
    print(f"   {_line('Net income', state.net_income)}")
    print(f"   {_line('+ Depreciation & amortization', state.depreciation + state.amortization_expense)}")
    print(f"   {_line('+/- Working capital', working_capital)}")
    print(f"   {_line('Operating cash flow', operating + working_capital)}")
    print("-" * 46)
    print(f"   {_line('Net change in cash', net_change)}")
    print(f"💰 {_line('Ending cash', state.cash)}")
    print("=" * 46)


def print_kpis(state: FinancialState, stock_price: float, stock_up: bool, ticker: str = "PZZ"):
    arrow = "▲" if stock_up else "▼"
    price = f"{ticker} ${stock_price:,.2f} {arrow}"
    print(signed(bold(price), 1 if stock_up else -1))
    print(
        f"Cash {format_to_dollar(state.cash)} | "
        f"Orders/day {state.daily_orders:.1f} | "
        f"Avg ticket ${state.average_order_value:.2f}"
    )
    print(
        f"Satisfaction [{_bar(state.customer_satisfaction, 100)}] "
        f"{state.customer_satisfaction:.0f}/100"
    )


def print_deck(deck: List[Strategy], cash: float, deck_cooldown: int = 0):
    print(f"\n🃏 {bold('Strategies')}")
    if deck_cooldown > 0:
        print(yellow(f"Locked for {deck_cooldown}s"))
    if not deck:
        print(dim("No strategies left."))
    for i, strategy in enumerate(deck, start=1):
        cost = format_to_dollar(strategy.cost)
        affordable = strategy.cost <= 0 or strategy.cost <= cash
        cost = cost if affordable else red(cost)
        print(f"{i}) {bold(strategy.title)} [{strategy.category.value}] {cost}")
        print(dim(f"   {strategy.description}"))


def _history_row(p: HistoryPoint) -> str:
    return (
        f"{p.month:>5} {format_to_dollar(p.revenue):>12} "
        f"{format_to_dollar(p.net_income):>12} {format_to_dollar(p.cash):>12} "
        f"{p.stock_price:>8.2f}"
    )


def print_history(history: HistorySeries):
    print(f"\n📅 {bold('History')}")
    print(f"{'Month':>5} {'Revenue':>12} {'Net income':>12} {'Cash':>12} {'Price':>8}")
    for p in history:
        print(_history_row(p))
    print("-" * 53)
    total_net = history.total_net_income()
    print(
        f"{'Total':>5} {format_to_dollar(history.total_revenue()):>12} "
        f"{signed(f'{format_to_dollar(total_net):>12}', total_net)}"
    )


def print_turn_summary(month: int, history: HistorySeries):
    """Résumé d'une clôture : CA, résultat, variation du cours."""
    latest = history.latest
    if latest is None:
        return
    previous = history.previous
    delta = latest.stock_price - previous.stock_price if previous else 0.0
    print(
        f"\n=== 📅 Month {month} closed === "
        f"Revenue {format_to_dollar(latest.revenue)} | "
        f"Net {signed(format_to_dollar(latest.net_income), latest.net_income)} | "
        f"Price ${latest.stock_price:.2f} ({signed(f'{delta:+.2f}', delta)})"
    )


def print_report(report: AnalystReport, month: int):
    print(f"\n📞 {bold(f'Earnings call — Month {month}')}")
    score_text = f"{report.rating.value} ({report.score}/100)"
    print(signed(bold(score_text), report.score - 50))
    print(cyan(report.feedback))
