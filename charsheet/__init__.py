"""Character sheet manager API and client."""
