"""
Infrastructure services: task scheduling and terminal rendering.
"""
