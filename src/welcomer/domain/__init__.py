"""Domain layer: the user record, its rules, and validation outcomes."""
