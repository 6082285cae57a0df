"""Identity resolution and role-gated access."""
