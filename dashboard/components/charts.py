"""
Chart Components for the Trade Ledger dashboard.

Cumulative profit line and win/loss doughnut built from ledger snapshots.
"""

import pandas as pd
import plotly.graph_objects as go
from typing import Any, Dict


# Theme shared by all ledger charts
CHART_THEME = {
    'bg_color': '#ffffff',
    'plot_bg': '#ffffff',
    'grid_color': 'rgba(189, 195, 199, 0.4)',
    'text_color': '#2c3e50',
    'title_color': '#2c3e50',
    'profit_line': '#3498db',
    'profit_fill': 'rgba(52, 152, 219, 0.1)',
    'win_color': '#27ae60',
    'loss_color': '#e74c3c',
}


def create_layout_template() -> Dict[str, Any]:
    """Create base layout template for all charts."""
    return {
        'paper_bgcolor': CHART_THEME['bg_color'],
        'plot_bgcolor': CHART_THEME['plot_bg'],
        'font': {
            'family': 'Segoe UI, Tahoma, Geneva, Verdana, sans-serif',
            'color': CHART_THEME['text_color'],
            'size': 12
        },
        'xaxis': {
            'gridcolor': CHART_THEME['grid_color'],
            'showgrid': True,
        },
        'yaxis': {
            'gridcolor': CHART_THEME['grid_color'],
            'showgrid': True,
        },
        'margin': {'l': 40, 'r': 20, 't': 50, 'b': 40},
    }


def create_profit_chart(
    cumulative: pd.DataFrame,
    height: int = 350
) -> go.Figure:
    """
    Create the "Profit Over Time" line chart.

    Args:
        cumulative: Frame with 'date' and 'cumulative_pnl' columns, oldest first
        height: Chart height in pixels

    Returns:
        Plotly Figure object
    """
    labels = [d.strftime('%Y-%m-%d') for d in cumulative['date']]

    fig = go.Figure(data=go.Scatter(
        x=labels,
        y=list(cumulative['cumulative_pnl']),
        name='Cumulative Profit',
        mode='lines',
        line=dict(color=CHART_THEME['profit_line'], width=2, shape='spline', smoothing=0.1),
        fill='tozeroy',
        fillcolor=CHART_THEME['profit_fill'],
        hovertemplate='$%{y:.2f}<extra></extra>'
    ))

    layout = create_layout_template()
    layout.update({
        'height': height,
        'title': {'text': 'Profit Over Time', 'x': 0.5},
        'showlegend': False
    })
    layout['yaxis'].update({'tickprefix': '$'})

    fig.update_layout(**layout)

    return fig


def create_win_rate_donut(
    winning: int,
    losing: int,
    height: int = 350
) -> go.Figure:
    """Create the "Win Rate" doughnut of winning vs losing trades."""
    fig = go.Figure(data=[go.Pie(
        labels=['Winning Trades', 'Losing Trades'],
        values=[winning, losing],
        hole=0.5,
        sort=False,
        marker=dict(
            colors=[CHART_THEME['win_color'], CHART_THEME['loss_color']],
            line=dict(width=1)
        ),
        hovertemplate='<b>%{label}</b><br>%{value} trades<br>%{percent}<extra></extra>'
    )])

    layout = create_layout_template()
    layout.update({
        'height': height,
        'title': {'text': 'Win Rate', 'x': 0.5},
        'showlegend': True,
        'legend': {'orientation': 'h', 'y': -0.1}
    })

    fig.update_layout(**layout)

    return fig
