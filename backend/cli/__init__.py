"""
Command-line entry points for GridSnake.
"""
