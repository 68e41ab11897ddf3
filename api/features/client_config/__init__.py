"""Public, browser-safe client configuration values."""
