"""
CoopCredit Guard - Loan Default Risk Service

A FastAPI-based microservice that scores cooperative loan applicants
for default risk, records every prediction in a history log, and
aggregates that log into dashboard analytics.
"""

__version__ = "0.1.0"
