"""
Application Layer

Contains the application's use cases, DTOs and the per-session state.
This layer orchestrates the flow of data to and from the entities,
and directs those entities to use their business rules.
"""
