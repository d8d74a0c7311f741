"""HTTP server, configuration and tie-break players."""
