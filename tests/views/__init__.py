"""
Houses the tests for the REST api layer of the program.

The tests assert that the formatting of the responses remains stable,
and that the system gives the expected errors when interacted with
incorrectly. They run against an in-memory database.
"""
