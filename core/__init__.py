"""
Game-independent pieces: asset loading, match progression, cue timing.
"""
