"""
Operator scripts.
"""
