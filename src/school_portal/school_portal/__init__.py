"""School Portal package.

Organized by feature modules (users, classes, students, attendance, marks, ...)
with a thin Flask controller layer on top of service/repository layers.
"""
