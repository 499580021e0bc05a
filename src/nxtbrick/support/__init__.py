"""
Small helpers shared by the brick and its interfaces.
"""
