from flask import Blueprint, jsonify

from roster.person.report import REPORTS, PersonReport

bp = Blueprint("reports", __name__)
person_report = PersonReport()


@bp.route("", methods=["GET"])
def list_reports():
    """List the available report names."""
    return jsonify(REPORTS)


@bp.route("/average-salary", methods=["GET"])
def average_salary():
    """Mean salary across everyone."""
    return jsonify({"average_salary": person_report.average_salary()})


@bp.route("/non-billable-salaries", methods=["GET"])
def non_billable_salaries():
    """Total salary in non-billable roles."""
    return jsonify({"non_billable_salaries": person_report.non_billable_salaries()})


@bp.route("/average-salary-by-role", methods=["GET"])
def average_salary_by_role():
    """Mean salary keyed by role name."""
    return jsonify(person_report.average_salary_by_role())


@bp.route("/employee-count", methods=["GET"])
def employee_count():
    """Direct report counts keyed by person name."""
    return jsonify(person_report.employee_count())


@bp.route("/lower-than-average-at-location", methods=["GET"])
def lower_than_average_at_location():
    """People paid below their location's average."""
    return jsonify(person_report.with_lower_than_average_salaries_at_location())


@bp.route("/highest-salaried", methods=["GET"])
def highest_salaried():
    """Top three earners, ordered by name."""
    return jsonify(person_report.highest_salaried_ordered_by_name())


@bp.route("/maximum-salary-by-location", methods=["GET"])
def maximum_salary_by_location():
    """Highest salary keyed by location ID."""
    return jsonify(person_report.maximum_salary_by_location())


@bp.route("/managers-by-salary-difference", methods=["GET"])
def managers_by_salary_difference():
    """Managers ordered by salary gap to their reports."""
    return jsonify(person_report.managers_by_average_salary_difference())
