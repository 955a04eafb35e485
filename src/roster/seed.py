"""Seed a small demo organisation into the database."""
from roster.location.repository import LocationRepository
from roster.logger import get_logger
from roster.person.repository import PersonRepository
from roster.role.repository import RoleRepository

logger = get_logger(__name__)

INITIAL_LOCATIONS = ["Boston", "London"]

INITIAL_ROLES = [
    {"name": "Developer", "billable": True},
    {"name": "Designer", "billable": True},
    {"name": "Office Manager", "billable": False},
]

# (name, salary, location, role, manager name)
INITIAL_PEOPLE = [
    ("Grace", 150_000, "Boston", "Developer", None),
    ("Alan", 110_000, "Boston", "Developer", "Grace"),
    ("Ada", 120_000, "London", "Developer", "Grace"),
    ("Dieter", 95_000, "London", "Designer", "Ada"),
    ("Paula", 60_000, "Boston", "Office Manager", "Grace"),
    ("Tim", 55_000, "London", "Office Manager", "Ada"),
]


def seed() -> dict:
    """
    Create the demo locations, roles and people, skipping any that
    already exist by name. Safe to run repeatedly.

    Returns:
        Count of rows created per table
    """
    location_repo = LocationRepository()
    role_repo = RoleRepository()
    person_repo = PersonRepository()
    created = {"locations": 0, "roles": 0, "people": 0}

    locations = {}
    for name in INITIAL_LOCATIONS:
        existing = location_repo.get_by_name(name)
        if existing:
            logger.info("Skipping location %s - already exists", name)
            locations[name] = existing
            continue
        locations[name] = location_repo.create(name=name)
        created["locations"] += 1

    roles = {}
    for role in INITIAL_ROLES:
        existing = role_repo.get_by_name(role["name"])
        if existing:
            logger.info("Skipping role %s - already exists", role["name"])
            roles[role["name"]] = existing
            continue
        roles[role["name"]] = role_repo.create(**role)
        created["roles"] += 1

    people = {}
    for name, salary, location, role, manager in INITIAL_PEOPLE:
        existing = person_repo.get_by_name(name)
        if existing:
            logger.info("Skipping person %s - already exists", name)
            people[name] = existing
            continue

        result = person_repo.create(
            name=name,
            salary=salary,
            location_id=locations[location]["id"],
            role_id=roles[role]["id"],
            manager_id=people[manager]["id"] if manager else None,
        )
        people[name] = result
        created["people"] += 1
        logger.info("Created: %s (id=%s)", result["name"], result["id"])

    return created


def main():
    created = seed()
    logger.info(
        "Seeded %d locations, %d roles, %d people",
        created["locations"],
        created["roles"],
        created["people"],
    )


if __name__ == "__main__":
    main()
