"""
handlers/menu_handler.py
------------------------
Console menu for managing projects.
Reads a selection, delegates to ProjectService and prints the result.
The currently selected project is the only state kept between selections.
"""

from decimal import Decimal
from typing import Any, Callable, Optional

from models.project import Project
from services.project_service import ProjectService
from utils.decimals import normalize_decimal
from utils.logger import get_logger

logger = get_logger(__name__)

CLEAR_VALUE = "-"

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


class ProjectMenu:
    """
    Interactive project menu.

    Args:
        service: The ProjectService to delegate to.
        read: Prompt function, ``input`` by default.
        write: Output function, ``print`` by default.
    """

    def __init__(
        self,
        service: Optional[ProjectService] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.service = service or ProjectService()
        self.read = read
        self.write = write
        self.cur_project: Optional[Project] = None
        self._actions = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def run(self) -> None:
        """Loop until the user enters a blank selection."""
        while True:
            try:
                selection = self._get_user_selection()
                if selection is None:
                    self.write("\nExiting the menu.")
                    return
                action = self._actions.get(selection)
                if action is None:
                    self.write(f"\n{selection} is not a valid selection. Try again.")
                    continue
                action()
            except EOFError:
                self.write("\nExiting the menu.")
                return
            except Exception as e:
                logger.debug("Menu operation failed", exc_info=True)
                self.write(f"\nError: {e}")

    # ── Operations ────────────────────────────────────────

    def create_project(self) -> None:
        name = self._get_string_input("Enter the project name")
        if name is None:
            raise ValueError("A project name is required.")
        project = Project(
            name=name,
            estimated_hours=self._get_decimal_input("Enter the estimated hours"),
            actual_hours=self._get_decimal_input("Enter the actual hours"),
            difficulty=self._get_int_input("Enter the project difficulty (1-5)"),
            notes=self._get_string_input("Enter the project notes"),
        )
        db_project = self.service.add_project(project)
        self.write(f"You have successfully created project: {db_project}")

    def list_projects(self) -> None:
        projects = self.service.fetch_all_projects()
        self.write("\nProjects:")
        for project in projects:
            self.write(f"   {project.id}: {project.name}")

    def select_project(self) -> None:
        self.list_projects()
        project_id = self._get_int_input("Enter a project ID to select a project")
        self.cur_project = None
        if project_id is None:
            return
        self.cur_project = self.service.fetch_project_by_id(project_id)
        self._print_project_details(self.cur_project)

    def update_project_details(self) -> None:
        """
        Prompt for each field. A blank answer keeps the current value and
        ``-`` clears an optional field.
        """
        if self.cur_project is None:
            self.write("\nPlease select a project.")
            return

        cur = self.cur_project
        self.write(f"\nPress Enter to keep a value, or '{CLEAR_VALUE}' to clear it.")
        name = self._get_string_input(f"Enter the project name [{cur.name}]")
        if name == CLEAR_VALUE:
            raise ValueError("A project name is required.")

        project = Project(
            id=cur.id,
            name=cur.name if name is None else name,
            estimated_hours=self._edit_value(
                f"Enter the estimated hours [{cur.estimated_hours}]",
                cur.estimated_hours, normalize_decimal),
            actual_hours=self._edit_value(
                f"Enter the actual hours [{cur.actual_hours}]",
                cur.actual_hours, normalize_decimal),
            difficulty=self._edit_value(
                f"Enter the project difficulty (1-5) [{cur.difficulty}]",
                cur.difficulty, self._parse_int),
            notes=self._edit_value(
                f"Enter the project notes [{cur.notes}]", cur.notes, str),
        )
        self.service.modify_project_details(project)
        self.cur_project = self.service.fetch_project_by_id(cur.id)
        self.write(f"Project #{cur.id} updated.")

    def delete_project(self) -> None:
        self.list_projects()
        project_id = self._get_int_input("Enter the ID of the project to delete")
        if project_id is None:
            return
        self.service.delete_project(project_id)
        self.write(f"Project {project_id} was deleted successfully.")
        if self.cur_project is not None and self.cur_project.id == project_id:
            self.cur_project = None

    # ── Input helpers ─────────────────────────────────────

    def _get_user_selection(self) -> Optional[int]:
        self._print_operations()
        return self._get_int_input("\nEnter a menu selection")

    def _get_int_input(self, prompt: str) -> Optional[int]:
        text = self._get_string_input(prompt)
        if text is None:
            return None
        return self._parse_int(text)

    def _edit_value(self, prompt: str, current, parse: Callable[[str], Any]):
        text = self._get_string_input(prompt)
        if text is None:
            return current
        if text == CLEAR_VALUE:
            return None
        return parse(text)

    @staticmethod
    def _parse_int(text: str) -> int:
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"{text} is not a valid number. Try again.") from None

    def _get_decimal_input(self, prompt: str) -> Optional[Decimal]:
        text = self._get_string_input(prompt)
        if text is None:
            return None
        return normalize_decimal(text)

    def _get_string_input(self, prompt: str) -> Optional[str]:
        text = self.read(f"{prompt}: ")
        return text.strip() or None

    # ── Output helpers ────────────────────────────────────

    def _print_operations(self) -> None:
        self.write("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self.write(f"   {line}")
        if self.cur_project is None:
            self.write("\nYou are not working with a project.")
        else:
            self.write(f"\nYou are working with project: {self.cur_project}")

    def _print_project_details(self, project: Project) -> None:
        self.write(f"\n{project}")
        for title, items in (
            ("Materials", project.materials),
            ("Steps", project.steps),
            ("Categories", project.categories),
        ):
            self.write(f"  {title}:")
            for item in items:
                self.write(f"     {item}")
