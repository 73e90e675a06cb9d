"""Application layer package: services that orchestrate domain ports."""
