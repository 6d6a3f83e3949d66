"""OrgAdmin - Department and role administration API.

Create, list, fetch, update and delete departments and roles, each with a
name that is unique within its type.
"""

__version__ = "0.1.0"

from orgadmin.infrastructure.api.app import app

__all__ = ["app", "__version__"]
