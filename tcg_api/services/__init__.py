"""Services Layer — request semantics between routes and the store."""
