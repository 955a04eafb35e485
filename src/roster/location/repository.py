from typing import List, Optional

from roster import db


class LocationRepository:
    """
    Repository for location-related data access.
    Encapsulates all SQL and queries for the locations table.
    """

    def get_by_id(self, location_id: int) -> Optional[dict]:
        """Get location by ID."""
        return db.fetch_one("SELECT * FROM locations WHERE id = %s", (location_id,))

    def get_by_name(self, name: str) -> Optional[dict]:
        """Get the first location with the given name."""
        return db.fetch_one(
            "SELECT * FROM locations WHERE name = %s ORDER BY id LIMIT 1",
            (name,),
        )

    def list(self) -> List[dict]:
        """List all locations."""
        return db.fetch_all("SELECT * FROM locations ORDER BY name, id")

    def create(self, name: str) -> dict:
        """Create a new location."""
        return db.fetch_one(
            "INSERT INTO locations (name) VALUES (%s) RETURNING *",
            (name,),
        )
