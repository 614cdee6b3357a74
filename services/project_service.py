"""
services/project_service.py
---------------------------
Business logic for projects.
Turns the repository's None / False "not found" signals into NotFoundError;
every other failure passes through untouched.
"""

from typing import Optional

from models.project import Project
from repositories.project_repo import ProjectRepository
from utils.exceptions import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectService:
    """Thin layer between the console menu and ProjectRepository."""

    def __init__(self, repo: Optional[ProjectRepository] = None):
        self.repo = repo or ProjectRepository()

    def add_project(self, project: Project) -> Project:
        return self.repo.insert_project(project)

    def fetch_all_projects(self) -> list[Project]:
        return self.repo.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Fetch a project with its materials, steps and categories.

        Raises:
            NotFoundError: If no project has this id.
        """
        project = self.repo.fetch_project_by_id(project_id)
        if project is None:
            raise self._not_found(project_id)
        return project

    def modify_project_details(self, project: Project) -> None:
        """
        Save the editable fields of an existing project.

        Raises:
            NotFoundError: If no project has this id.
        """
        if not self.repo.modify_project_details(project):
            raise self._not_found(project.id)

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project.

        Raises:
            NotFoundError: If no project has this id.
        """
        if not self.repo.delete_project(project_id):
            raise self._not_found(project_id)

    @staticmethod
    def _not_found(project_id) -> NotFoundError:
        logger.warning(f"Project #{project_id} not found")
        return NotFoundError(f"Project with id={project_id} does not exist.")
