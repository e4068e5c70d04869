"""
On-disk addressing for the model store: reference parsing, digest handling,
store layout and path resolution.
"""
