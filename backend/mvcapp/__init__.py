"""Application package for the student records backend.

This package exposes the model, repository and service modules used to
manage `Student` records. It is intentionally lightweight; individual
modules contain the concrete implementations and documentation.
"""
