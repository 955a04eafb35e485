from typing import List, Optional

from roster import db


class RoleRepository:
    """
    Repository for role-related data access.
    Encapsulates all SQL and queries for the roles table.
    """

    def get_by_id(self, role_id: int) -> Optional[dict]:
        """Get role by ID."""
        return db.fetch_one("SELECT * FROM roles WHERE id = %s", (role_id,))

    def get_by_name(self, name: str) -> Optional[dict]:
        """Get the first role with the given name."""
        return db.fetch_one(
            "SELECT * FROM roles WHERE name = %s ORDER BY id LIMIT 1",
            (name,),
        )

    def list(self) -> List[dict]:
        """List all roles."""
        return db.fetch_all("SELECT * FROM roles ORDER BY name, id")

    def create(self, name: str, billable: bool = True) -> dict:
        """Create a new role. Roles are billable unless stated otherwise."""
        return db.fetch_one(
            "INSERT INTO roles (name, billable) VALUES (%s, %s) RETURNING *",
            (name, billable),
        )
