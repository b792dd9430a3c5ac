"""Core building blocks: transport, authentication, models and metrics."""
