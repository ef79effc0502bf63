"""Connectors for reading report files and the records they hold.

- ``connectors.healthcare``: canonical claim and eligibility records
- ``connectors.file``: CSV/XLSX loading and invalid-claims export
"""
