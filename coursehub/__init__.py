"""coursehub: course platform API over a single JSON document."""
