"""Signup Validator — independent field validation with error accumulation."""

__version__ = "1.0.0"
