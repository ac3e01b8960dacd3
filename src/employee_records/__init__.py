"""Employee Records package.

Organized by feature modules (employees, users, exchange, ...) with a thin
Flask controller layer over service/repository layers.
"""
