"""Database Infrastructure — SQLAlchemy Base shared by ORM models and Alembic."""
