"""Payroll System package.

This package is organized by feature modules (payroll, ...) with a thin Flask
controller layer on top of pure calculators, aggregators and services.
"""
