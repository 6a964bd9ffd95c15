"""
Branch report service.

A FastAPI application exposing CRUD endpoints for the Area / Sub-Area /
Branch hierarchy on top of a SQLAlchemy-managed relational store.
"""
