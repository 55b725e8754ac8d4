"""
Core domain models, arbitrary-precision arithmetic, and contracts.

This module contains the foundational building blocks that are independent
of the command-line layer (argument parsing, stdout/stderr, exit codes).
"""
