"""HTTP interface of the catalog bounded context."""
