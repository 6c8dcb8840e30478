"""Estate market reporting harness over the market PostgreSQL schema."""
