"""Converter shapes and the native converters for primitive types."""
