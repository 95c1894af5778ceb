"""Factory agents for the geology room."""

from ore_geology.factories.geology_factory import GeologyAgent
from ore_geology.factories.geology_factory import create_geology_agent

__all__ = [
    "GeologyAgent",
    "create_geology_agent",
]
