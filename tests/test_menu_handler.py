import unittest
from decimal import Decimal
from unittest import mock

from handlers.menu_handler import ProjectMenu
from models.project import Project
from services.project_service import ProjectService
from utils.exceptions import NotFoundError


class ProjectMenuTestCase(unittest.TestCase):
    def setUp(self):
        self.service = mock.create_autospec(ProjectService, instance=True)
        self.output = []

    def run_menu(self, *answers):
        replies = iter(answers)
        menu = ProjectMenu(self.service, read=lambda _prompt: next(replies), write=self.output.append)
        menu.run()
        return menu

    def test_blank_selection_quits(self):
        self.run_menu("")
        self.assertIn("\nExiting the menu.", self.output)

    def test_add_project(self):
        self.service.add_project.side_effect = lambda p: p
        self.run_menu("1", "Deck", "10.5", "", "3", "build deck", "")

        project = self.service.add_project.call_args.args[0]
        self.assertEqual(project.name, "Deck")
        self.assertEqual(project.estimated_hours, Decimal("10.50"))
        self.assertIsNone(project.actual_hours)
        self.assertEqual(project.difficulty, 3)
        self.assertEqual(project.notes, "build deck")

    def test_invalid_number_is_reported_and_loop_continues(self):
        self.run_menu("abc", "9", "")
        self.assertIn("\nError: abc is not a valid number. Try again.", self.output)
        self.assertIn("\n9 is not a valid selection. Try again.", self.output)

    def test_select_unknown_project_reports_not_found(self):
        self.service.fetch_all_projects.return_value = []
        self.service.fetch_project_by_id.side_effect = NotFoundError("Project with id=5 does not exist.")
        menu = self.run_menu("3", "5", "")
        self.assertIsNone(menu.cur_project)
        self.assertIn("\nError: Project with id=5 does not exist.", self.output)

    def test_update_keeps_blank_fields(self):
        current = Project(id=1, name="Deck", estimated_hours="10.5", difficulty=3, notes="build deck")
        self.service.fetch_all_projects.return_value = [current]
        self.service.fetch_project_by_id.return_value = current

        menu = self.run_menu("3", "1", "4", "", "12", "", "", "bigger deck", "")

        updated = self.service.modify_project_details.call_args.args[0]
        self.assertEqual(updated.id, 1)
        self.assertEqual(updated.name, "Deck")
        self.assertEqual(updated.estimated_hours, Decimal("12.00"))
        self.assertEqual(updated.difficulty, 3)
        self.assertEqual(updated.notes, "bigger deck")
        self.assertIs(menu.cur_project, current)

    def test_update_dash_clears_optional_fields(self):
        current = Project(id=1, name="Deck", estimated_hours="10.5", actual_hours="4",
                          difficulty=3, notes="build deck")
        self.service.fetch_all_projects.return_value = [current]
        self.service.fetch_project_by_id.return_value = current

        self.run_menu("3", "1", "4", "", "", "-", "-", "-", "")

        updated = self.service.modify_project_details.call_args.args[0]
        self.assertEqual(updated.name, "Deck")
        self.assertEqual(updated.estimated_hours, Decimal("10.50"))
        self.assertIsNone(updated.actual_hours)
        self.assertIsNone(updated.difficulty)
        self.assertIsNone(updated.notes)

    def test_update_cannot_clear_name(self):
        current = Project(id=1, name="Deck")
        self.service.fetch_all_projects.return_value = [current]
        self.service.fetch_project_by_id.return_value = current

        self.run_menu("3", "1", "4", "-", "")

        self.service.modify_project_details.assert_not_called()
        self.assertIn("\nError: A project name is required.", self.output)

    def test_update_without_selection(self):
        self.run_menu("4", "")
        self.assertIn("\nPlease select a project.", self.output)
        self.service.modify_project_details.assert_not_called()

    def test_delete_clears_selected_project(self):
        current = Project(id=1, name="Deck")
        self.service.fetch_all_projects.return_value = [current]
        self.service.fetch_project_by_id.return_value = current

        menu = self.run_menu("3", "1", "5", "1", "")

        self.service.delete_project.assert_called_once_with(1)
        self.assertIsNone(menu.cur_project)
        self.assertIn("Project 1 was deleted successfully.", self.output)

    def test_end_of_input_quits(self):
        def read(_prompt):
            raise EOFError

        ProjectMenu(self.service, read=read, write=self.output.append).run()
        self.assertIn("\nExiting the menu.", self.output)


if __name__ == "__main__":
    unittest.main()
