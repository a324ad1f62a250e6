"""Page objects for the MusicLMS screens under test."""

from .assignments_page import AssignmentsPage
from .dashboard_page import DashboardPage
from .invite_page import InvitePage
from .login_page import LoginPage
from .signup_page import SignupPage

__all__ = ["AssignmentsPage", "DashboardPage", "InvitePage", "LoginPage", "SignupPage"]
