"""Business Manager package.

This package is organized by feature modules (customers, ledger, employees, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
