"""Core building blocks: transport, errors and media transfer."""
