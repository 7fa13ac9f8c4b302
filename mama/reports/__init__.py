"""
Report builders.
"""
from .dashboard import DashboardSummary, entries_frame, summarize, render_dashboard

__all__ = [
    'DashboardSummary',
    'entries_frame',
    'summarize',
    'render_dashboard',
]
