"""Command line interface for the Auth0 Management SDK."""
