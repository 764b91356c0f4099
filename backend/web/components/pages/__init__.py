"""
Page components: one class per tab of the role-based home screen.
"""

from .dashboard import DashboardPage
from .profile import ProfilePage
from .settings import SettingsPage
from .courses import CoursesPage
from .notifications import NotificationsPage
from .classes import ClassesPage
from .admin import AdminPage

__all__ = [
    "DashboardPage",
    "ProfilePage",
    "SettingsPage",
    "CoursesPage",
    "NotificationsPage",
    "ClassesPage",
    "AdminPage",
]
