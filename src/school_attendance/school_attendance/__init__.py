"""School attendance package.

Feature modules (academic_year, students, absences, reports) keep the pure
aggregation core apart from the thin Flask controllers and MySQL repositories.
"""
