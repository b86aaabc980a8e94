"""
Fixed academic structure: colleges, their departments and default faculty.
"""

COLLEGES = [
    "KING FAISAL CENTER FOR ISLAMIC ARABIC AND ASIAN STUDIES",
    "COLLEGE OF AGRICULTURE",
    "COLLEGE OF BUSINESS ADMINISTRATION AND ACCOUNTANCY",
    "COLLEGE OF EDUCATION",
    "COLLEGE OF FISHERIES AND AQUATIC SCIENCES",
    "COLLEGE OF FORESTRY AND ENVIRONMENTAL STUDIES",
    "COLLEGE OF ENGINEERING",
    "COLLEGE OF HEALTH SCIENCES",
    "COLLEGE OF HOSPITALITY AND TOURISM MANAGEMENT",
    "COLLEGE OF INFORMATION AND COMPUTING SCIENCES",
    "COLLEGE OF NATURAL SCIENCES AND MATHEMATICS",
    "COLLEGE OF PUBLIC AFFAIRS",
    "COLLEGE OF SOCIAL SCIENCES AND HUMANITIES",
    "COLLEGE OF SPORTS PHYSICAL EDUCATION AND RECREATION",
    "COLLEGE OF LAW",
]

# Colleges without an entry have no selectable department yet
DEPARTMENTS: dict[str, list[str]] = {
    "COLLEGE OF INFORMATION AND COMPUTING SCIENCES": [
        "Department of Information Sciences",
        "Department of Computer Sciences",
    ],
}

DEFAULT_FACULTY: dict[str, list[str]] = {
    "Department of Information Sciences": [
        "Joseph Sieras",
        "Reymark Delena",
    ],
    "Department of Computer Sciences": [
        "Janice Wade",
        "Llewelyn Elcana",
    ],
}


def departments_for(college: str) -> list[str]:
    """Return the departments of a college (empty for unknown colleges)."""
    return DEPARTMENTS.get(college, [])


def college_of(department: str) -> str | None:
    """Return the college a department belongs to."""
    for college, departments in DEPARTMENTS.items():
        if department in departments:
            return college
    return None
