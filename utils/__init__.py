"""
utils package
-------------

Contains utility modules used throughout the planner.

Includes helpers for loading configuration constants and files, validating inputs,
slot labelling and logging setup.
"""
