"""
Pydantic schemas for parameter definitions and API request/response validation.

All FastAPI endpoints MUST use strict Pydantic models with explicit types.
"""
