from decimal import Decimal
from typing import List, Optional

import pandas as pd

from roster import db


class PersonRepository:
    """
    Repository for person-related data access.
    Encapsulates all SQL and queries for the people table and its
    location, role and manager associations.
    """

    def get_by_id(self, person_id: int) -> Optional[dict]:
        """Get person by ID."""
        return db.fetch_one("SELECT * FROM people WHERE id = %s", (person_id,))

    def get_by_name(self, name: str) -> Optional[dict]:
        """Get the first person with the given name."""
        return db.fetch_one(
            "SELECT * FROM people WHERE name = %s ORDER BY id LIMIT 1",
            (name,),
        )

    def list(self) -> List[dict]:
        """List all people."""
        return db.fetch_all("SELECT * FROM people ORDER BY name, id")

    def create(
        self,
        name: str,
        salary: Decimal,
        location_id: int,
        role_id: int,
        manager_id: int = None,
    ) -> dict:
        """Create a new person."""
        return db.fetch_one(
            """
            INSERT INTO people (name, salary, location_id, role_id, manager_id)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING *
            """,
            (name, salary, location_id, role_id, manager_id),
        )

    # Associations

    def get_location(self, person_id: int) -> Optional[dict]:
        """Get the location a person works at."""
        return db.fetch_one(
            """
            SELECT locations.*
            FROM locations
            INNER JOIN people ON people.location_id = locations.id
            WHERE people.id = %s
            """,
            (person_id,),
        )

    def get_role(self, person_id: int) -> Optional[dict]:
        """Get the role a person holds."""
        return db.fetch_one(
            """
            SELECT roles.*
            FROM roles
            INNER JOIN people ON people.role_id = roles.id
            WHERE people.id = %s
            """,
            (person_id,),
        )

    def get_manager(self, person_id: int) -> Optional[dict]:
        """Get a person's manager, or None if they report to nobody."""
        return db.fetch_one(
            """
            SELECT managers.*
            FROM people managers
            INNER JOIN people ON people.manager_id = managers.id
            WHERE people.id = %s
            """,
            (person_id,),
        )

    def list_employees(self, manager_id: int) -> List[dict]:
        """List the direct reports of a manager."""
        return db.fetch_all(
            "SELECT * FROM people WHERE manager_id = %s ORDER BY name, id",
            (manager_id,),
        )

    def directory(self) -> pd.DataFrame:
        """
        Every person with their location, role and manager names resolved.

        Used for CSV exports; salaries come back as floats.
        """
        return db.fetch_dataframe(
            """
            SELECT
                people.id,
                people.name,
                people.salary,
                locations.name AS location,
                roles.name AS role,
                roles.billable,
                managers.name AS manager
            FROM people
            INNER JOIN locations ON locations.id = people.location_id
            INNER JOIN roles ON roles.id = people.role_id
            LEFT JOIN people managers ON managers.id = people.manager_id
            ORDER BY people.name, people.id
            """
        )
