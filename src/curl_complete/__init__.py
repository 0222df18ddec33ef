"""Complete curl commands from OpenAPI examples."""
