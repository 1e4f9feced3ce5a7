"""Dashboard components package."""

from .charts import (
    create_layout_template,
    create_profit_chart,
    create_win_rate_donut,
    CHART_THEME
)

__all__ = [
    # Charts
    'create_layout_template',
    'create_profit_chart',
    'create_win_rate_donut',
    'CHART_THEME',
]
