"""Adapters – JSON text codec and SQLAlchemy column type."""
