"""Settings, logging, credential checks and error types."""
