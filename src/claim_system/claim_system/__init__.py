"""Claim System package.

This package is organized by feature modules (claims, lecturers, attachments,
reports, ...) with service/repository layers backed by flat JSON files.
"""
