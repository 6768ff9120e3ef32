"""
Validator metric aggregation: time-series parsing, windows, queries and ranking.
"""
from .timeseries import extract_value, extract_latest, group_sum, group_latest
from .windows import TimeWindow, resolve_window, snapshot_window
from .ranking import RankedEntry, rank_totals, rank_success_rates

__all__ = [
    'extract_value', 'extract_latest', 'group_sum', 'group_latest',
    'TimeWindow', 'resolve_window', 'snapshot_window',
    'RankedEntry', 'rank_totals', 'rank_success_rates',
]
