"""User management API: CRUD over a single ``users`` table."""
