"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- Filename pattern extraction and matching
- Learning use cases (learn, match, apply, delete, stats)

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.
"""
