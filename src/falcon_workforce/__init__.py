"""Falcon workforce package.

This package is organized by feature modules (authorization, sessions,
payroll, ...) with a thin Flask controller layer over plain service classes.
"""
