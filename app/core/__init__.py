"""Domain logic independent of the web and storage layers."""
