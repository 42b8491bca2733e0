"""
Services package for the Organization Directory API.

Contains query assembly and the service layer that wraps repository
calls with failure translation.
"""
