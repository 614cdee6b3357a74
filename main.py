"""
main.py
-------
Entry point for the Projects console application.

Responsibilities:
    - Optionally create the schema (--init-db).
    - Run the interactive project menu.
"""

import sys

from db.init_db import create_tables
from handlers.menu_handler import ProjectMenu
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Initialize and run the menu."""
    argv = sys.argv[1:] if argv is None else argv

    # ── 1. Database setup ─────────────────────────────────
    if "--init-db" in argv:
        logger.info("Initializing database schema...")
        create_tables()

    # ── 2. Menu loop ──────────────────────────────────────
    logger.info("Starting Projects menu.")
    ProjectMenu(ProjectService()).run()
    logger.info("Projects menu stopped.")


if __name__ == "__main__":
    main()
