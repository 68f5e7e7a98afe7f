"""Configuration, logging, errors, authentication and the product store."""
