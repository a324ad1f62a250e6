"""Assignments page object for E2E testing."""

from __future__ import annotations

from ..interactions import Interactions
from ..locators import Locator


class AssignmentsPage:
    """Page object for the teacher's ``/dashboard/assignments`` list and create dialog."""

    path = "/dashboard/assignments"

    NEW_ASSIGNMENT_BUTTON = Locator.text("New Assignment", tag="button", name="new assignment button")
    TITLE_INPUT = Locator.by_name("title", "assignment title input")
    DESCRIPTION_INPUT = Locator.by_name("description", "assignment description input")
    CREATE_BUTTON = Locator.css("[role='dialog'] button[type='submit']", "create assignment button")
    EMPTY_STATE = Locator.text("No assignments created", tag="h3", name="empty state heading")

    def __init__(self, ui: Interactions, base_url: str) -> None:
        self.ui = ui
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def open(self) -> "AssignmentsPage":
        self.ui.open(self.url)
        return self

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def click_new_assignment(self) -> "AssignmentsPage":
        self.ui.click(self.NEW_ASSIGNMENT_BUTTON)
        return self

    def enter_title(self, title: str) -> "AssignmentsPage":
        self.ui.type(self.TITLE_INPUT, title)
        return self

    def enter_description(self, description: str) -> "AssignmentsPage":
        self.ui.type(self.DESCRIPTION_INPUT, description)
        return self

    def select_student(self, student_name: str) -> "AssignmentsPage":
        self.ui.check_by_label(student_name)
        return self

    def attach_resource(self, resource_title: str) -> "AssignmentsPage":
        self.ui.check_by_label(resource_title)
        return self

    def click_create(self) -> None:
        self.ui.click(self.CREATE_BUTTON)

    def create_assignment(
        self,
        title: str,
        student: str,
        resource: str | None = None,
        description: str = "",
    ) -> None:
        self.click_new_assignment().enter_title(title)
        if description:
            self.enter_description(description)
        self.select_student(student)
        if resource:
            self.attach_resource(resource)
        self.click_create()

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------

    def is_assignment_visible(self, title: str) -> bool:
        link = Locator.text(title, tag="a", name=f"assignment '{title}'")
        return self.ui.is_displayed(link, timeout=None)

    def is_empty_state_displayed(self) -> bool:
        return self.ui.is_displayed(self.EMPTY_STATE)
