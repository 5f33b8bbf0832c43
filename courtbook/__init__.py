"""Court reservation backend."""
