"""User profile feature: validated upsert of sign-in profiles into ``users``."""
