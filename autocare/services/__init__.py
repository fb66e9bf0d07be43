"""
Service progress, image matching and notification logic.
"""
