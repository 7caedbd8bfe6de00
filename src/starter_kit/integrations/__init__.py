"""Integrations with the outside world (filesystem, HTTP, composer).

Each integration has an ABC in abc.py, a production implementation in
real.py and an in-memory fake for tests in fake.py.
"""
