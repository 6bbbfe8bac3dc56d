"""
Application layer.

Orchestrates domain objects through use cases and defines the ports
(repository protocols) the infrastructure layer implements.
"""
