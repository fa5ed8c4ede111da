"""HR Attendance package.

Feature modules (shifts, attendance) with a thin Flask controller layer on top
of a pure status classifier and its service layer.
"""
