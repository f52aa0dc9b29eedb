"""Configuration, logging, storage and security helpers."""
