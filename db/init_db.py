"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db

Rows in material, step and project_category are removed together with their
project through ON DELETE CASCADE; the application never deletes them itself.
"""

from db.connection import transaction
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Projects: one row per tracked project
CREATE TABLE IF NOT EXISTS project (
    project_id      SERIAL PRIMARY KEY,
    project_name    VARCHAR(128) NOT NULL,
    estimated_hours NUMERIC(7,2),
    actual_hours    NUMERIC(7,2),
    difficulty      INT,
    notes           TEXT
);

-- Categories: shared labels, linked to projects through project_category
CREATE TABLE IF NOT EXISTS category (
    category_id     SERIAL PRIMARY KEY,
    category_name   VARCHAR(128) NOT NULL UNIQUE
);

-- Materials needed by a project
CREATE TABLE IF NOT EXISTS material (
    material_id     SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    material_name   VARCHAR(128) NOT NULL,
    num_required    INT,
    cost            NUMERIC(7,2)
);

-- Ordered steps of a project
CREATE TABLE IF NOT EXISTS step (
    step_id         SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    step_text       TEXT NOT NULL,
    step_order      INT NOT NULL
);

-- Many-to-many junction between projects and categories
CREATE TABLE IF NOT EXISTS project_category (
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    category_id     INT NOT NULL REFERENCES category(category_id) ON DELETE CASCADE,
    UNIQUE (project_id, category_id)
);

CREATE INDEX IF NOT EXISTS idx_material_project ON material(project_id);
CREATE INDEX IF NOT EXISTS idx_step_project ON step(project_id, step_order);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with transaction() as conn, conn.cursor() as cur:
        cur.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    create_tables()
    print("Database schema created successfully.")
