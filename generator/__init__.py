"""OpenAPI to client code generator for the scorecard package."""
