"""HTTP surface: the v1 command/query API and the legacy whole-document routes."""
