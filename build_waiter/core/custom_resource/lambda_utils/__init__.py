"""
Helpers for the custom resource Lambda entry point.
"""
