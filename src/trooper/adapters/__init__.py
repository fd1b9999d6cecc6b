"""Front-end adapters driving the mode manager."""
