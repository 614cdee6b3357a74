import unittest
from unittest import mock

from db.init_db import SCHEMA_SQL, create_tables
from fakes import FakeConnection, patch_connect
import main


class CreateTablesTestCase(unittest.TestCase):
    def test_executes_schema_and_commits(self):
        conn = FakeConnection()
        with patch_connect(conn):
            create_tables()
        self.assertEqual(conn.executed[0][0], " ".join(SCHEMA_SQL.split()))
        self.assertEqual(conn.commits, 1)
        self.assertTrue(conn.closed)

    def test_dependent_tables_cascade_on_project_delete(self):
        self.assertEqual(SCHEMA_SQL.count("REFERENCES project(project_id) ON DELETE CASCADE"), 3)


class MainTestCase(unittest.TestCase):
    @mock.patch("main.ProjectMenu")
    @mock.patch("main.create_tables")
    def test_init_db_flag(self, create_tables_mock, menu_mock):
        main.main(["--init-db"])
        create_tables_mock.assert_called_once_with()
        menu_mock.return_value.run.assert_called_once_with()

    @mock.patch("main.ProjectMenu")
    @mock.patch("main.create_tables")
    def test_menu_only(self, create_tables_mock, menu_mock):
        main.main([])
        create_tables_mock.assert_not_called()
        menu_mock.return_value.run.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
