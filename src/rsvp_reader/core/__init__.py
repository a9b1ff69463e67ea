"""Document ingestion and display timing."""
