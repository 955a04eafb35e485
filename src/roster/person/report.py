"""
Canned salary and headcount reports over the people table.

Each report is a single fixed SQL statement; grouping, ranking and
aggregation all happen in the database. Empty tables give empty
results (or None for an average), never errors.
"""

from decimal import Decimal
from typing import Dict, List, Optional

from roster import db
from roster.logger import get_logger

logger = get_logger(__name__)


class PersonReport:
    """Read-only aggregate reports about people and their salaries."""

    def average_salary(self) -> Optional[Decimal]:
        """Mean salary to the cent. None when there are no people."""
        logger.debug("Running average_salary report")
        row = db.fetch_one("SELECT ROUND(AVG(salary), 2) AS average FROM people")
        return row["average"]

    def non_billable_salaries(self) -> Decimal:
        """Total salary paid to people in non-billable roles."""
        logger.debug("Running non_billable_salaries report")
        row = db.fetch_one(
            """
            SELECT COALESCE(SUM(people.salary), 0) AS total
            FROM people
            INNER JOIN roles ON roles.id = people.role_id
            WHERE roles.billable = false
            """
        )
        return row["total"]

    def average_salary_by_role(self) -> Dict[str, Decimal]:
        """Mean salary to the cent, keyed by role name."""
        logger.debug("Running average_salary_by_role report")
        rows = db.fetch_all(
            """
            SELECT roles.name, ROUND(AVG(people.salary), 2) AS average
            FROM people
            INNER JOIN roles ON roles.id = people.role_id
            GROUP BY roles.name
            ORDER BY roles.name
            """
        )
        return {row["name"]: row["average"] for row in rows}

    def employee_count(self) -> Dict[str, int]:
        """
        Number of direct reports keyed by person name.

        People with no reports are included with a count of 0. Rows are
        grouped by name, so two people sharing a name are counted together.
        """
        logger.debug("Running employee_count report")
        rows = db.fetch_all(
            """
            SELECT people.name, COUNT(employees.id) AS count
            FROM people
            LEFT JOIN people employees ON employees.manager_id = people.id
            GROUP BY people.name
            ORDER BY people.name
            """
        )
        return {row["name"]: row["count"] for row in rows}

    def with_lower_than_average_salaries_at_location(self) -> List[dict]:
        """People paid strictly less than the average at their location."""
        logger.debug("Running with_lower_than_average_salaries_at_location report")
        return db.fetch_all(
            """
            SELECT people.*
            FROM people
            INNER JOIN (
                SELECT location_id, AVG(salary) AS average
                FROM people
                GROUP BY location_id
            ) salaries ON salaries.location_id = people.location_id
            WHERE people.salary < salaries.average
            ORDER BY people.id
            """
        )

    def highest_salaried_ordered_by_name(self) -> List[dict]:
        """
        The three best-paid people, sorted by name.

        Ranking uses RANK(), so people tied on salary share a rank and a
        tie at third place returns every tied person.
        """
        logger.debug("Running highest_salaried_ordered_by_name report")
        return db.fetch_all(
            """
            SELECT people.*
            FROM people
            INNER JOIN (
                SELECT id, RANK() OVER (ORDER BY salary DESC) AS rank
                FROM people
            ) salaries ON salaries.id = people.id
            WHERE salaries.rank <= 3
            ORDER BY people.name, people.id
            """
        )

    def maximum_salary_by_location(self) -> Dict[int, Decimal]:
        """Highest salary keyed by location ID."""
        logger.debug("Running maximum_salary_by_location report")
        rows = db.fetch_all(
            """
            SELECT location_id, MAX(salary) AS maximum
            FROM people
            GROUP BY location_id
            ORDER BY location_id
            """
        )
        return {row["location_id"]: row["maximum"] for row in rows}

    def managers_by_average_salary_difference(self) -> List[dict]:
        """
        Managers ordered by how much more they earn than their reports.

        The difference is the manager's salary minus the average salary
        of their direct reports, largest first. People without reports
        are left out.
        """
        logger.debug("Running managers_by_average_salary_difference report")
        return db.fetch_all(
            """
            SELECT people.*
            FROM people
            INNER JOIN (
                SELECT manager_id, AVG(salary) AS average_employee_salary
                FROM people
                GROUP BY manager_id
            ) salaries ON salaries.manager_id = people.id
            ORDER BY (people.salary - salaries.average_employee_salary) DESC
            """
        )


# Report names exposed by the CLI and the HTTP API, in display order.
REPORTS = [
    "average_salary",
    "non_billable_salaries",
    "average_salary_by_role",
    "employee_count",
    "with_lower_than_average_salaries_at_location",
    "highest_salaried_ordered_by_name",
    "maximum_salary_by_location",
    "managers_by_average_salary_difference",
]
