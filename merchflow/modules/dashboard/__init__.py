"""Role dashboards: bucketed order views and admin statistics."""
