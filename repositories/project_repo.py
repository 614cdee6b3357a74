"""
repositories/project_repo.py
----------------------------
Data access layer for projects.
All SQL queries touching the `project` table and the rows hanging off it
(materials, steps, categories) live here.

Each public method runs in its own transaction on its own connection.
"Not found" is reported as None / False; raising is left to the service layer.
"""

from typing import Optional

from psycopg2.extras import RealDictCursor

from db.connection import transaction
from models.category import Category
from models.material import Material
from models.project import Project
from models.step import Step
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_TABLE = "category"
MATERIAL_TABLE = "material"
PROJECT_TABLE = "project"
PROJECT_CATEGORY_TABLE = "project_category"
STEP_TABLE = "step"


class ProjectRepository:
    """Repository for CRUD operations on the project table."""

    # ── CREATE ────────────────────────────────────────────

    def insert_project(self, project: Project) -> Project:
        """
        Insert a new project row.

        Args:
            project: The Project to persist.

        Returns:
            The same Project with its generated `id` populated.

        Raises:
            PersistenceError: If the INSERT fails (the transaction is rolled back).
            ValueError: If the project already has an id.
        """
        if project.id is not None:
            raise ValueError(f"Project #{project.id} is already persisted; use modify_project_details.")
        sql = f"""
            INSERT INTO {PROJECT_TABLE}
                (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING project_id;
        """
        with transaction() as conn, conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, (
                project.name, project.estimated_hours, project.actual_hours,
                project.difficulty, project.notes,
            ))
            project_id = cur.fetchone()["project_id"]
        project.id = project_id
        logger.info(f"Added project '{project.name}' #{project.id}")
        return project

    # ── READ ──────────────────────────────────────────────

    def fetch_all_projects(self) -> list[Project]:
        """
        Fetch every project ordered by name.
        Materials, steps and categories are not loaded.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} ORDER BY project_name;"
        with transaction() as conn, conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql)
            return [self._row_to_project(r) for r in cur.fetchall()]

    def fetch_project_by_id(self, project_id: int) -> Optional[Project]:
        """
        Fetch one project with its materials, steps and categories.

        All four queries share one transaction so the result is a consistent
        snapshot.

        Args:
            project_id: Primary key.

        Returns:
            The Project, or None if no row has this id.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} WHERE project_id = %s;"
        with transaction() as conn, conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            row = cur.fetchone()
            if row is None:
                return None

            project = self._row_to_project(row)
            project.materials.extend(self._fetch_project_materials(cur, project_id))
            project.steps.extend(self._fetch_project_steps(cur, project_id))
            project.categories.extend(self._fetch_project_categories(cur, project_id))
            return project

    def _fetch_project_materials(self, cur, project_id: int) -> list[Material]:
        sql = f"SELECT * FROM {MATERIAL_TABLE} WHERE project_id = %s ORDER BY material_id;"
        cur.execute(sql, (project_id,))
        return [self._row_to_material(r) for r in cur.fetchall()]

    def _fetch_project_steps(self, cur, project_id: int) -> list[Step]:
        sql = f"SELECT * FROM {STEP_TABLE} WHERE project_id = %s ORDER BY step_order;"
        cur.execute(sql, (project_id,))
        return [self._row_to_step(r) for r in cur.fetchall()]

    def _fetch_project_categories(self, cur, project_id: int) -> list[Category]:
        sql = f"""
            SELECT c.* FROM {CATEGORY_TABLE} c
            JOIN {PROJECT_CATEGORY_TABLE} pc USING (category_id)
            WHERE pc.project_id = %s
            ORDER BY c.category_name;
        """
        cur.execute(sql, (project_id,))
        return [self._row_to_category(r) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def modify_project_details(self, project: Project) -> bool:
        """
        Replace every mutable column of an existing project.

        Args:
            project: Project with updated fields (must have id set).

        Returns:
            True if exactly one row was updated, False if the id does not exist.
        """
        sql = f"""
            UPDATE {PROJECT_TABLE}
            SET project_name = %s, estimated_hours = %s, actual_hours = %s,
                difficulty = %s, notes = %s
            WHERE project_id = %s;
        """
        with transaction() as conn, conn.cursor() as cur:
            cur.execute(sql, (
                project.name, project.estimated_hours, project.actual_hours,
                project.difficulty, project.notes, project.id,
            ))
            updated = cur.rowcount == 1
        if updated:
            logger.info(f"Updated project #{project.id}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete_project(self, project_id: int) -> bool:
        """
        Delete a project by id. Dependent rows go with it via ON DELETE CASCADE.

        Returns:
            True if exactly one row was deleted, False otherwise.
        """
        sql = f"DELETE FROM {PROJECT_TABLE} WHERE project_id = %s;"
        with transaction() as conn, conn.cursor() as cur:
            cur.execute(sql, (project_id,))
            deleted = cur.rowcount == 1
        if deleted:
            logger.info(f"Deleted project #{project_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_project(row: dict) -> Project:
        """Convert a project row to a Project domain object."""
        return Project(
            id=row["project_id"],
            name=row["project_name"],
            estimated_hours=row["estimated_hours"],
            actual_hours=row["actual_hours"],
            difficulty=row["difficulty"],
            notes=row["notes"],
        )

    @staticmethod
    def _row_to_material(row: dict) -> Material:
        return Material(
            id=row["material_id"],
            project_id=row["project_id"],
            name=row["material_name"],
            num_required=row["num_required"],
            cost=row["cost"],
        )

    @staticmethod
    def _row_to_step(row: dict) -> Step:
        return Step(
            id=row["step_id"],
            project_id=row["project_id"],
            step_text=row["step_text"],
            step_order=row["step_order"],
        )

    @staticmethod
    def _row_to_category(row: dict) -> Category:
        return Category(id=row["category_id"], name=row["category_name"])
