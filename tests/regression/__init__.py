"""Regression tests for complete feasibility assessments.

These tests pin the full calculated result for reference scenarios so any
change to a formula, constant or rounding point is caught.

Usage:
    pytest -m regression
"""
