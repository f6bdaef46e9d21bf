"""
UML Assistant backend.

Conversational software-modeling assistant: classifies each chat turn,
grounds the answer in retrieved project documents, and for diagram requests
runs a PlantUML refinement pipeline before persisting the turn.
"""

__version__ = "0.1.0"
