"""Configuration, logging and environment helpers."""
