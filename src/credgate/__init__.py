"""credgate - username/password login issuing signed identity tokens."""

__version__ = "0.1.0"
