"""Core data models shared by the compiler, archetypes and CLI."""
