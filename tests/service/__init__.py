"""
Houses the tests for the service layer of the program. This layer is what manages the internal API,
and is what the REST interface speaks through when communicating with the rest of the system.
"""
