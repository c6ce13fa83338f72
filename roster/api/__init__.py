"""HTTP API for student records."""
