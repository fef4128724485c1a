"""Attendance Dashboard package.

This package is organized by feature modules (attendance, dashboards) with a
thin Flask controller layer on top of pure derivation functions and a
repository that talks to the attendance REST backend.
"""
