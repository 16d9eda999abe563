"""
Jobly data service: companies, jobs and users over a relational store.
"""

__version__ = "1.0.0"
