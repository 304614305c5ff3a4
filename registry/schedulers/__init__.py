from .setup import setup_schedulers
from .scheduled_report import run_scheduled_report

__all__ = [
    "setup_schedulers",
    "run_scheduled_report"
]
