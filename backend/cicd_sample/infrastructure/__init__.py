"""Infrastructure Layer — logging and request middleware, the only code that touches process-wide state."""
