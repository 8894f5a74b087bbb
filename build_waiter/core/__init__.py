"""
Core build-waiting logic.

Trigger, poll and report stages plus the custom resource harness that
composes them.
"""
