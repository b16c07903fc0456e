from .planner import PlannerView
from .quick_refs import QuickRefsView
from .settings import SettingsView

__all__ = [
    "PlannerView",
    "QuickRefsView",
    "SettingsView",
]
