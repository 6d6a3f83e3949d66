"""SQLAlchemy models for OrgAdmin tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from orgadmin.infrastructure.persistence.models.department import DepartmentModel
from orgadmin.infrastructure.persistence.models.role import RoleModel

__all__ = [
    "DepartmentModel",
    "RoleModel",
]
