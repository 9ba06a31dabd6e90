# src/flextime/report/__init__.py
"""
flextime.report
~~~~~~~~~~~~~~~

Plain-dict views of flex results for renderers (terminal, ``--json`` output,
browser dashboard).  All hour figures are rounded to two decimals here and
nowhere else.

Basic usage::

    import json
    from flextime.report import dashboard_data

    print(json.dumps(dashboard_data(start, end, entries, 7.4, 37, holidays)))
"""

from __future__ import annotations

from flextime.report.report import (
    DECIMALS,
    dashboard_data,
    dashboard_views,
    daily_view,
    periods_view,
    summary_view,
    trend_view,
    weekly_view,
)

__all__ = [
    "DECIMALS",
    "dashboard_data",
    "dashboard_views",
    "daily_view",
    "periods_view",
    "summary_view",
    "trend_view",
    "weekly_view",
]
