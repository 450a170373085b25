"""Config layer — property sources, library settings, logging setup."""
