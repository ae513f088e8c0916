"""Shift Attendance package.

Feature modules (attendance, shifts, reports) sit on top of a pure accounting
engine, with a thin Flask controller layer and service/repository layers.
"""
