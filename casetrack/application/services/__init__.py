"""Application services: case store, directory, imports, queries, dashboards."""
