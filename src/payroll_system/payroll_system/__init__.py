"""Payroll System package.

Organized by feature modules (attendance, employees, payroll) with a thin Flask
controller layer over service/repository layers. The payroll calculator is a
pure computation engine with no I/O.
"""
