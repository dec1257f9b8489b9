"""
API Documentation package

drf-yasg schema views and the decorators used to document endpoints.
"""
