"""
Reusable pygame widgets.
"""
