"""
Scenes that can be driven by the main loop.
"""
