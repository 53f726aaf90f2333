"""HTTP API for the EatSafe compliance core."""
