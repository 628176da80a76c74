"""
Pydantic schema definitions for API payloads.

Books and users each have their own module with request and response
models; the calculator payload lives in ``calculator``.
"""
