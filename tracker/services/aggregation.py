import logging
import math
import re
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, Optional

from tracker.core.interfaces import ChartWidget
from tracker.core.models import ChartData, Transaction

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_KEY_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])")

ChartFactory = Callable[[ChartData], ChartWidget]


def month_key(tx_date: Any) -> Optional[str]:
    """
    Returns the YYYY-MM prefix of a date string, or None if the prefix
    is not a valid month.
    """
    key = str(tx_date or "")[:7]
    if MONTH_KEY_PATTERN.fullmatch(key):
        return key
    return None


def parse_amount(value: Any) -> float:
    # Unreadable amounts count as zero
    try:
        amount = float(str(value).strip())
    except (TypeError, ValueError):
        logger.warning(f"Importe no numérico, se cuenta como 0: {value!r}")
        return 0.0
    if not math.isfinite(amount):
        logger.warning(f"Importe no finito, se cuenta como 0: {value!r}")
        return 0.0
    return amount


def calculate_monthly_totals(transactions: Iterable[Transaction]) -> Dict[str, float]:
    totals = defaultdict(float)
    for tx in transactions:
        key = month_key(tx.date)
        if key is None:
            logger.warning(f"Fecha no ISO, transacción fuera del gráfico: {tx}")
            continue
        totals[key] += parse_amount(tx.amount)
    return dict(totals)


def month_label(key: str) -> str:
    year, month = key.split("-")
    return f"{MONTH_NAMES[int(month) - 1]} {year}"


def aggregate(transactions: Iterable[Transaction]) -> ChartData:
    """
    Groups transactions by calendar month.

    Labels come out in chronological order and every amount is read
    through the sorted month keys, so amounts[i] is always the total
    of labels[i].
    """
    totals = calculate_monthly_totals(transactions)
    months = sorted(totals)
    return ChartData(
        months=months,
        labels=[month_label(key) for key in months],
        amounts=[totals[key] for key in months],
    )


def render_chart(chart: Optional[ChartWidget], data: ChartData, factory: ChartFactory) -> ChartWidget:
    """
    Creates the chart on first use and updates it in place afterwards.
    Returns the widget the caller must keep for the next render.
    """
    if data.is_empty:
        logger.info("Sin transacciones con fecha válida, gráfico vacío")

    if chart is None:
        logger.info(f"Creando gráfico con {len(data.labels)} meses")
        return factory(data)

    chart.update(data.labels, data.amounts)
    return chart
