"""Infrastructure layer: file I/O for resource documents."""
