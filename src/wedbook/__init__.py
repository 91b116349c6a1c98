"""wedbook — field validation for the contact and wedding planner."""

__version__ = "0.1.0"
