"""Example: use the service layer without Flask.

Controllers are a thin layer; the use cases live in EmployeeService.
"""

import importlib

from employee_records.config import get_settings_module
from employee_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={k: getattr(settings, k) for k in dir(settings) if k.isupper()})
    service = container.employee_service

    page = service.list_page(page=1, page_size=5, sort_by="lastName")
    for e in page.items:
        print(e.id, e.full_name, e.department, e.salary)
    print(service.stats().to_dict())


if __name__ == "__main__":
    main()
