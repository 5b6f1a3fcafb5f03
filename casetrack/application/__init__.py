"""Application layer: services, DTOs and storage ports."""
