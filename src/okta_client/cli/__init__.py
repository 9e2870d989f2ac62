"""Command line interface for the Okta client."""
