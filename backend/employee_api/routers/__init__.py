"""HTTP routers for the employee API."""
