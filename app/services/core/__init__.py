"""
Core Services Module

Course CRUD, student CRUD and the two routines that consult the course
service on behalf of students.
"""


__all__ = []
