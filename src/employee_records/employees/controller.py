from __future__ import annotations

from flask import Blueprint, Flask, Response, jsonify, request

from ..common.http import json_body, json_errors, token_required
from ..common.validators import parse_optional_float, parse_positive_int
from ..container import Container
from ..core.constants import EXPORT_FILE_NAME
from ..core.enums import CsvMode
from .query import EmployeeFilter


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employees", __name__, url_prefix=app.config["API_PREFIX"])
    service = container.employee_service
    auth_required = token_required(container.auth_service)
    default_page_size = int(app.config.get("DEFAULT_PAGE_SIZE", 10))

    def _sort_args() -> dict:
        return {"sort_by": request.args.get("sortBy") or None, "direction": request.args.get("sortDir") or None}

    @bp.route("/employees", methods=["GET"], endpoint="list_employees")
    @auth_required
    @json_errors
    def list_employees():
        page = service.list_page(
            page=parse_positive_int(request.args.get("page"), 1),
            page_size=parse_positive_int(request.args.get("pageSize"), default_page_size),
            **_sort_args(),
        )
        return jsonify(
            {
                "employees": [e.to_dict() for e in page.items],
                "totalCount": page.total_count,
                "page": page.page,
                "pageSize": page.page_size,
            }
        )

    @bp.route("/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @auth_required
    @json_errors
    def get_employee(employee_id: int):
        return jsonify({"employee": service.get(employee_id).to_dict()})

    @bp.route("/employees", methods=["POST"], endpoint="create_employee")
    @auth_required
    @json_errors
    def create_employee():
        employee = service.create(json_body())
        return jsonify({"message": "Employee created successfully", "employee": employee.to_dict()})

    @bp.route("/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @auth_required
    @json_errors
    def update_employee(employee_id: int):
        employee = service.update(employee_id, json_body())
        return jsonify({"message": "Employee updated successfully", "employee": employee.to_dict()})

    @bp.route("/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @auth_required
    @json_errors
    def delete_employee(employee_id: int):
        service.delete(employee_id)
        return jsonify({"message": "Employee deleted successfully"})

    @bp.route("/employees/search", methods=["GET"], endpoint="search_employees")
    @auth_required
    @json_errors
    def search_employees():
        criteria = EmployeeFilter(
            department=request.args.get("department") or None,
            position=request.args.get("position") or None,
            min_salary=parse_optional_float(request.args.get("minSalary"), "minSalary"),
            max_salary=parse_optional_float(request.args.get("maxSalary"), "maxSalary"),
        )
        results = service.search(q=request.args.get("q", ""), criteria=criteria, **_sort_args())
        return jsonify({"employees": [e.to_dict() for e in results], "totalCount": len(results)})

    @bp.route("/employees/stats", methods=["GET"], endpoint="employee_stats")
    @auth_required
    @json_errors
    def employee_stats():
        return jsonify(service.stats().to_dict())

    @bp.route("/departments", methods=["GET"], endpoint="departments")
    @auth_required
    @json_errors
    def departments():
        return jsonify({"departments": service.departments()})

    @bp.route("/positions", methods=["GET"], endpoint="positions")
    @auth_required
    @json_errors
    def positions():
        return jsonify({"positions": service.positions()})

    @bp.route("/employees/export", methods=["GET"], endpoint="export_employees")
    @auth_required
    @json_errors
    def export_employees():
        return Response(
            service.export_csv(),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILE_NAME}"'},
        )

    @bp.route("/employees/import", methods=["POST"], endpoint="import_employees")
    @auth_required
    @json_errors
    def import_employees():
        count = service.import_csv(
            request.get_data(as_text=True),
            mode=request.args.get("mode") or CsvMode.HEADER,
        )
        return jsonify({"message": "Import completed successfully", "imported": count})

    app.register_blueprint(bp)
