"""HTTP glue: dependencies and exception handlers."""
