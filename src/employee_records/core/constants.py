"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 10
DEFAULT_DEPARTMENT = "General"
DEFAULT_POSITION = "Employee"

DATA_FILE_NAME = "employees.json"
UPLOADS_DIR_NAME = "uploads"
EXPORT_FILE_NAME = "employees_export.csv"

CSV_HEADER = (
    "ID",
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Department",
    "Position",
    "Salary",
    "Hire Date",
    "Active",
)

# (label, lower bound inclusive, upper bound exclusive); None means unbounded.
SALARY_BUCKETS = (
    ("0-30k", 0, 30000),
    ("30k-50k", 30000, 50000),
    ("50k-70k", 50000, 70000),
    ("70k-100k", 70000, 100000),
    ("100k+", 100000, None),
)
