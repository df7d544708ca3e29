"""
Database models module.

This module imports all database models to ensure they are registered with
SQLAlchemy's Base.metadata before table creation. The services query these
tables with parameterized SQL; the models are the single source of the DDL
for create_all() and the Alembic migrations.
"""
from jobly.db.models.company import Company
from jobly.db.models.job import Job
from jobly.db.models.user import User
from jobly.db.models.application import Application

__all__ = [
    "Company",
    "Job",
    "User",
    "Application",
]
