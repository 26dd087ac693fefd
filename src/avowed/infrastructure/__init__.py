"""Infrastructure layer: file I/O for record and schema documents."""
