"""Adapters exposing derived converters to pydantic and click."""
