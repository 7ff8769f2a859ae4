"""Pydantic Schemas: request/response contracts for the REST API.

Invariants:
    - Wire format is camelCase (caloriesBurned, bodyFat, userId, createdAt)
    - Create/replace payloads carry every required field; patch payloads carry none

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
